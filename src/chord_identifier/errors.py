class NoteParseError(ValueError):
    def __init__(self, token: str):
        super().__init__(f"invalid note: {token!r}")
        self.token = token


class ChordParseError(ValueError):
    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason
