class WireSettings:
    def __init__(
        self,
        legacy_content_length: bool = True,
        encoding: str = "utf-8",
    ):
        self.legacy_content_length = legacy_content_length
        self.encoding = encoding

    @property
    def content_length_terminator(self) -> str:
        # existing clients expect "Content-Length: <n>;"
        if self.legacy_content_length:
            return ";\r\n"
        return "\r\n"
