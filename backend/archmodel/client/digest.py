import hashlib
from typing import Optional


class Md5Digest:
    """Hex MD5 of serialized workspace content. None is treated as ""."""

    def generate(self, content: Optional[str]) -> str:
        if content is None:
            content = ""
        return hashlib.md5(content.encode("utf-8")).hexdigest()
