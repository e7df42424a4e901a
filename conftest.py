from dataclasses import dataclass, field

import pytest

from events import PlayerCommandPreprocessEvent, WarpCreateEvent, WarpDeleteEvent


@dataclass
class FakePlayer:
    name: str = "Steve"
    permissions: set[str] = field(default_factory=set)
    checked: list[str] = field(default_factory=list)

    def has_permission(self, permission: str) -> bool:
        self.checked.append(permission)
        return permission in self.permissions


@pytest.fixture(autouse=True)
def clear_handlers():
    yield
    for event_class in (PlayerCommandPreprocessEvent, WarpCreateEvent, WarpDeleteEvent):
        event_class.get_handler_list().clear()


@pytest.fixture
def player():
    return FakePlayer(permissions={"essentials.setwarp", "essentials.delwarp"})


@pytest.fixture
def make_player():
    return FakePlayer
