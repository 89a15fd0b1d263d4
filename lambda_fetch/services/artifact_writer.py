# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Write downloaded artifact bytes to the local filesystem."""

from pathlib import Path

from ..errors import WriteFailedError


class ArtifactWriter:
    """Writes artifact bytes to a destination path, replacing any existing file."""

    def __init__(self, create_parents: bool = False):
        """
        Args:
            create_parents: Create missing parent directories before writing
        """
        self.create_parents = create_parents

    def write(self, data: bytes, dest: str | Path) -> Path:
        """
        Write ``data`` to ``dest``.

        Args:
            data: Artifact bytes
            dest: Destination file path

        Returns:
            The path written to

        Raises:
            WriteFailedError: If the destination is a directory or not writable
        """
        path = Path(dest)

        if path.is_dir():
            raise WriteFailedError(str(path), detail="destination is a directory")

        try:
            if self.create_parents:
                path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            raise WriteFailedError(str(path), detail=e) from e

        return path
