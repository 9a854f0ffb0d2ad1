from enum import Enum


class BracketRound(str, Enum):
    PLAY_IN = "PLAY_IN"
    SEMIFINAL = "SEMIFINAL"
    CHAMPIONSHIP = "CHAMPIONSHIP"


class SourceKind(str, Enum):
    FILE = "FILE"
    HTTP = "HTTP"
