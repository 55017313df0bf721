from tillbook.application.commands.user.complete_onboarding_command import (
    CompleteOnboardingCommand,
)
from tillbook.application.commands.user.update_profile_command import (
    UpdateProfileCommand,
)

__all__ = ["CompleteOnboardingCommand", "UpdateProfileCommand"]
