class TrustError(Exception):
    pass


class QuarterbackNotFound(TrustError):
    def __init__(self, identifier):
        super().__init__(f"Quarterback not found: {identifier}")
        self.identifier = identifier


class InvalidVoteDirection(TrustError):
    def __init__(self, direction):
        super().__init__('Invalid direction. Must be "more" or "less"')
        self.direction = direction
