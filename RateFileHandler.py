"""
Rate-table reading for local files and HTTP(S) URLs.

Overview
--------
`RateFileHandler.read_lines(source)` returns the raw text lines of a rate
table. A rate table holds one declared rate per line:

    m;cm;100
    cm;mm;10
    kg;g;1000

Key points
----------
- `source` is a filesystem path, or a URL starting with "http://" or
  "https://" that is fetched with `requests`.
- Lines come back without their line endings. End of input is end of data;
  no sentinel blank line is appended.
- Anything that stops the source from being read (missing file, permission
  problem, connection error, non-200 response) raises
  `SourceUnavailableError`.

Dependencies
------------
- `requests` for remote rate tables.
"""

from pathlib import Path
from typing import List

import requests

from ConversionErrors import SourceUnavailableError

DEFAULT_TIMEOUT = 10  # seconds, remote rate tables only
REMOTE_PREFIXES = ("http://", "https://")


class RateFileHandler:
    """
    Read rate tables from disk or over HTTP.

    Attributes
    ----------
    encoding : str
        Text encoding of local rate files.
    timeout : float
        Request timeout in seconds for remote rate tables.
    """

    def __init__(self, encoding="utf-8", timeout=DEFAULT_TIMEOUT):
        self.encoding = encoding
        self.timeout = timeout


    @staticmethod
    def is_remote(source):
        return str(source).lower().startswith(REMOTE_PREFIXES)


    def read_lines(self, source) -> List[str]:
        """
        Return every line of the rate table at `source`.

        Parameters
        ----------
        source : str | pathlib.Path
            Local path or http(s) URL.

        Returns
        -------
        list[str]
            Lines in file order, line endings removed.

        Raises
        ------
        SourceUnavailableError
            If the source cannot be read.
        """
        if self.is_remote(source):
            text = self.fetch_remote(str(source))
        else:
            text = self.read_local(source)
        return text.splitlines()


    def read_local(self, path) -> str:
        try:
            with open(Path(path), "r", encoding=self.encoding) as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as ex:
            raise SourceUnavailableError("Could not open rate file", source=str(path), reason=str(ex))


    def fetch_remote(self, url) -> str:
        try:
            response = requests.get(url, timeout=self.timeout)
        except requests.RequestException as ex:
            raise SourceUnavailableError("Could not fetch rate table", source=url, reason=str(ex))

        if response.status_code == 200:
            return response.text
        else:
            raise SourceUnavailableError(
                "Could not fetch rate table", source=url, reason=f"{response.status_code} - {response.text}"
            )
