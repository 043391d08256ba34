class InvariantViolation(Exception):
    pass


class ContentNotFound(LookupError):
    def __init__(self, message="Content not found"):
        super().__init__(message)
