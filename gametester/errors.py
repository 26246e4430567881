class GameTesterError(Exception):
    """Base class for every fatal harness error."""


class SeedRangeOutOfBounds(GameTesterError):
    def __init__(self, seed: int, instances: int):
        self.seed = seed
        self.instances = instances
        super().__init__(
            f"Seed range goes out of bounds (seed={seed}, instances={instances})"
        )


class BrokenChildCommunication(GameTesterError):
    def __init__(self, seed: int, reason: str = ""):
        self.seed = seed
        message = f"Can't communicate with child (seed={seed})"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class InvalidPlayerName(GameTesterError, ValueError):
    pass


class InvalidTestConfig(GameTesterError, ValueError):
    pass
