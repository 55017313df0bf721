from tillbook.application.commands.admin.delete_user_command import DeleteUserCommand
from tillbook.application.commands.admin.update_user_role_command import (
    UpdateUserRoleCommand,
)

__all__ = ["DeleteUserCommand", "UpdateUserRoleCommand"]
