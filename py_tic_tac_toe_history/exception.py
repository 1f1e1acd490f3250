class GameError(Exception):
    pass


class InvalidMoveError(GameError):
    pass


class InvalidStepError(GameError):
    pass
