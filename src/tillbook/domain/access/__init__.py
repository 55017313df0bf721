from tillbook.domain.access.access_policy import (
    AccessDecision,
    AccessPolicy,
    AccessRequirement,
    resolve_route_requirement,
)

__all__ = [
    "AccessDecision",
    "AccessPolicy",
    "AccessRequirement",
    "resolve_route_requirement",
]
