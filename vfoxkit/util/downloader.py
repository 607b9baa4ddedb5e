"""Fetch a file over HTTP into a local directory with a progress bar."""

from __future__ import annotations

import os
import posixpath
from urllib.parse import urlsplit

import requests
from tqdm import tqdm

_CHUNK_SIZE = 64 * 1024


class SourceNotFoundError(Exception):
    """The server answered 404 for the requested file."""


class Downloader:
    """Downloads files into local_path, naming them after the URL path."""

    def __init__(self, local_path: str | os.PathLike[str]) -> None:
        self.local_path = os.fspath(local_path)

    def download(self, url: str) -> str:
        """Download url and return the path of the written file.

        Raises SourceNotFoundError when the server responds with 404.
        """
        with requests.get(url, stream=True) as response:
            if response.status_code == 404:
                raise SourceNotFoundError("source file not found")

            name = posixpath.basename(urlsplit(url).path)
            path = os.path.join(self.local_path, name)

            length = response.headers.get("Content-Length")
            total = int(length) if length and length.isdigit() else None

            fd = os.open(path, os.O_CREAT | os.O_WRONLY, 0o644)
            with os.fdopen(fd, "wb") as out, tqdm(
                total=total,
                desc="Downloading",
                unit="B",
                unit_scale=True,
                unit_divisor=1024,
            ) as bar:
                for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                    out.write(chunk)
                    bar.update(len(chunk))
        return path