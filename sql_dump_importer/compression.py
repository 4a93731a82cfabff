"""
Compression schemes and their decompressing command templates.
"""

import shlex
from dataclasses import dataclass, replace
from typing import Optional

from .exceptions import UnknownCompressionError


@dataclass(frozen=True)
class CompressionScheme:
    """A compression format and the shell templates that pipe it into a client.

    Templates are ``str.format`` strings with ``{client}`` and ``{file}``
    placeholders. ``{file}`` receives an already shell-quoted path.

    The decompressing templates are shell pipelines, so the exit code seen by
    the caller is the client's. A corrupt archive that decompresses to an
    empty stream is reported as a successful import.
    """
    id: str
    template: str
    pipe_viewer_template: str
    use_pipe_viewer: bool = False

    def decompressing_command(self, client_command: str, file_path: str) -> str:
        """Return the shell command that feeds ``file_path`` into ``client_command``."""
        template = self.pipe_viewer_template if self.use_pipe_viewer else self.template
        return template.format(client=client_command, file=shlex.quote(file_path))


UNCOMPRESSED = CompressionScheme(
    id="none",
    template="{client} < {file}",
    pipe_viewer_template="pv {file} | {client}",
)

GZIP = CompressionScheme(
    id="gzip",
    template="gzip -dc < {file} | {client}",
    pipe_viewer_template="pv -cN gzip {file} | gzip -d | pv -cN mysql | {client}",
)

BZIP2 = CompressionScheme(
    id="bzip2",
    template="bzip2 -dc < {file} | {client}",
    pipe_viewer_template="pv -cN bzip2 {file} | bzip2 -d | pv -cN mysql | {client}",
)

XZ = CompressionScheme(
    id="xz",
    template="xz -dc < {file} | {client}",
    pipe_viewer_template="pv -cN xz {file} | xz -d | pv -cN mysql | {client}",
)


class CompressionResolver:
    """Maps compression ids to schemes."""

    SCHEMES: dict[str, CompressionScheme] = {
        'gzip': GZIP,
        'gz': GZIP,
        'bzip2': BZIP2,
        'bz2': BZIP2,
        'xz': XZ,
    }

    def __init__(self, use_pipe_viewer: bool = False):
        self.use_pipe_viewer = use_pipe_viewer

    def resolve(self, compression_id: Optional[str]) -> CompressionScheme:
        """Return the scheme for ``compression_id``; no id means uncompressed."""
        if not compression_id:
            scheme = UNCOMPRESSED
        else:
            scheme = self.SCHEMES.get(compression_id.lower())
            if scheme is None:
                raise UnknownCompressionError(
                    f"Unknown compression '{compression_id}'. "
                    f"Supported: {', '.join(self.supported())}"
                )

        if self.use_pipe_viewer:
            return replace(scheme, use_pipe_viewer=True)
        return scheme

    @classmethod
    def supported(cls) -> list[str]:
        """Primary ids of all known schemes, without aliases."""
        return sorted({scheme.id for scheme in cls.SCHEMES.values()})
