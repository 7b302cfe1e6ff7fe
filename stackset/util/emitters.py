from typing import IO, Optional, Union


class EmitterError(BaseException):
    pass


class IndentationContext:
    def __init__(self, emitter: 'Emitter', level: int):
        self.emitter = emitter
        self.level = level

    def __enter__(self):
        self.emitter.indent += self.level

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.emitter.indent -= self.level


class WriteContext:
    def __init__(self, emitter: 'Emitter'):
        self.emitter = emitter

    def __enter__(self) -> 'Emitter':
        return self.emitter

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.emitter.close()


class Emitter:
    """
    Writes report lines, each prefixed by four spaces per indentation level.

    Streams handed in by the caller are flushed but never closed, only files
    opened by name are.
    """
    indent: int
    out: Optional[IO[str]]
    owns_out: bool
    echo: Optional[IO[str]]

    def __init__(self, out: Union[None, str, IO[str]] = None, echo: Optional[IO[str]] = None):
        self.indent = 0
        self.out = None
        self.owns_out = False
        if out is not None:
            self.write_to(out)
        self.echo = echo

    def indentation(self, level: int = 1) -> IndentationContext:
        return IndentationContext(self, level)

    def close(self) -> None:
        if self.out is not None:
            if self.owns_out:
                self.out.close()
            else:
                self.out.flush()
            self.out = None
            self.owns_out = False

    def write_to(self, out: Union[str, IO[str]]) -> WriteContext:
        self.close()
        if isinstance(out, str):
            self.out = open(out, 'w')
            self.owns_out = True
        else:
            self.out = out
        return WriteContext(self)

    def emit(self, line: str) -> None:
        if self.out is None:
            raise EmitterError('no associated file')
        line = '    ' * self.indent + line + '\n'
        for stream in (self.out, self.echo):
            if stream is not None:
                stream.write(line)
                stream.flush()
