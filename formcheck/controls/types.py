"""Shared type definitions for controls."""
from enum import Enum
from typing import Literal


class ValueState(str, Enum):
    """Visual state written to a control; rendered by the host."""
    NONE = "None"
    ERROR = "Error"


class Signal(str, Enum):
    """Change-type notifications a control may fire."""
    LIVE_CHANGE = "liveChange"
    CHANGE = "change"
    SELECT = "select"
    SELECTION_CHANGE = "selectionChange"
    TOKEN_UPDATE = "tokenUpdate"


# Attachment order for a control that supports several signals
OBSERVED_SIGNALS: tuple[Signal, ...] = (
    Signal.LIVE_CHANGE,
    Signal.CHANGE,
    Signal.SELECT,
    Signal.SELECTION_CHANGE,
    Signal.TOKEN_UPDATE,
)

# Event parameter carrying tokens removed by an in-flight token update
REMOVED_TOKENS_PARAM = "removedTokens"

ValueStateName = Literal["None", "Error"]
