from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class MirrorRule:
    match_host_suffix: str
    replacement_host: str

    def matches(self, host: str) -> bool:
        """Host is the suffix itself or one of its subdomains"""
        return host == self.match_host_suffix or host.endswith("." + self.match_host_suffix)


MIRROR_RULES: tuple[MirrorRule, ...] = (
    MirrorRule(match_host_suffix="twitter.com", replacement_host="nitter.net"),
    MirrorRule(match_host_suffix="medium.com", replacement_host="scribe.rip"),
)


@dataclass
class ParsedUrl:
    scheme: str
    netloc: str
    host: str  # lower-cased hostname, no userinfo or port
    path: str
    query: Optional[str] = None  # None when there is no '?'
    fragment: Optional[str] = None  # None when there is no '#'

    def geturl(self, netloc: Optional[str] = None) -> str:
        url = f"{self.scheme}://{netloc if netloc is not None else self.netloc}{self.path}"
        if self.query is not None:
            url += f"?{self.query}"
        if self.fragment is not None:
            url += f"#{self.fragment}"
        return url


@dataclass(frozen=True)
class TextSpan:
    start: int
    end: int
    text: str
