"""
Configuration for warp command detection.
"""

from pydantic import BaseModel, ConfigDict, field_validator

from command.base import WarpAction

CREATE_PERMISSION = "essentials.setwarp"
DELETE_PERMISSION = "essentials.delwarp"

DEFAULT_CREATE_COMMANDS = frozenset({"/setwarp", "/esetwarp", "/createwarp", "/ecreatewarp"})
DEFAULT_DELETE_COMMANDS = frozenset({"/delwarp", "/edelwarp", "/remwarp", "/eremwarp", "/rmwarp", "/ermwarp"})


class WarpCommandConfig(BaseModel):
    """Recognised warp commands and the permissions that gate them."""

    model_config = ConfigDict(frozen=True)

    create_commands: frozenset[str] = DEFAULT_CREATE_COMMANDS
    delete_commands: frozenset[str] = DEFAULT_DELETE_COMMANDS
    create_permission: str = CREATE_PERMISSION
    delete_permission: str = DELETE_PERMISSION

    @field_validator("create_commands", "delete_commands")
    @classmethod
    def check_commands(cls, commands: frozenset[str]) -> frozenset[str]:
        for command in commands:
            if not command.startswith("/"):
                raise ValueError(f"Command {command!r} must start with '/'")
            if " " in command:
                raise ValueError(f"Command {command!r} must not contain spaces")
        return commands

    @field_validator("create_permission", "delete_permission")
    @classmethod
    def check_permission(cls, permission: str) -> str:
        if not permission:
            raise ValueError("Permission cannot be empty")
        return permission

    def permission_for(self, action: WarpAction) -> str:
        if action is WarpAction.CREATE:
            return self.create_permission
        return self.delete_permission

    def commands_for(self, action: WarpAction) -> frozenset[str]:
        if action is WarpAction.CREATE:
            return self.create_commands
        return self.delete_commands
