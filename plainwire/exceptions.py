class PlainwireError(Exception):
    pass


class ResponseWriteError(PlainwireError):
    def __init__(self, sink, msg: str = ""):
        self.sink = sink
        super().__init__(msg)
