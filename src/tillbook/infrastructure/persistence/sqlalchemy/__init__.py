from tillbook.infrastructure.persistence.sqlalchemy.init_db import create_tables

__all__ = ["create_tables"]
