import logging
import re
from typing import Iterable, Iterator, Optional
from urllib.parse import urlsplit

from wizards_bot.mirrors.models import MIRROR_RULES, MirrorRule, ParsedUrl, TextSpan

logger = logging.getLogger(__name__)

# https://www.regextester.com/94502
URL_RE = re.compile(
    r"https?://[\w.-]+(?:\.[\w.-]+)+[\w\-._~:/?#\[\]@!$&'()*+,;=]*"
)


def find_url_spans(text: str) -> Iterator[TextSpan]:
    for match in URL_RE.finditer(text):
        yield TextSpan(start=match.start(), end=match.end(), text=match.group(0))


def parse_url(candidate: str) -> Optional[ParsedUrl]:
    """Splits a candidate into its parts, None if there is no scheme or host"""
    try:
        parts = urlsplit(candidate)
        host = parts.hostname
    except ValueError:
        return None
    if not parts.scheme or not host:
        return None

    prefix = f"{parts.scheme}://{parts.netloc}"
    if not candidate.startswith(prefix):
        return None

    # Sliced from the candidate rather than taken from urlsplit so that an
    # empty '?' or '#' survives reassembly.
    rest = candidate[len(prefix):]
    rest, has_fragment, fragment = rest.partition("#")
    path, has_query, query = rest.partition("?")
    return ParsedUrl(
        scheme=parts.scheme,
        netloc=parts.netloc,
        host=host,
        path=path,
        query=query if has_query else None,
        fragment=fragment if has_fragment else None,
    )


def find_rule(host: str, rules: Iterable[MirrorRule] = MIRROR_RULES) -> Optional[MirrorRule]:
    for rule in rules:
        if rule.matches(host):
            return rule
    return None


def rewrite_url(candidate: str, rules: Iterable[MirrorRule] = MIRROR_RULES) -> str:
    """Rewrites a single URL to its mirror, or returns it untouched"""
    url = parse_url(candidate)
    if url is None:
        logger.debug(f"Unable to parse URL, leaving it untouched: {candidate}")
        return candidate

    rule = find_rule(url.host, rules)
    if rule is None:
        return candidate

    return f"{url.geturl(netloc=rule.replacement_host)} ([source]({candidate}))"


def rewrite_urls(text: str, rules: Iterable[MirrorRule] = MIRROR_RULES) -> str:
    """Replaces every mirrored URL in the text, everything else is kept as is"""
    rules = tuple(rules)
    pieces = []
    last = 0
    for span in find_url_spans(text):
        pieces.append(text[last:span.start])
        pieces.append(rewrite_url(span.text, rules))
        last = span.end
    pieces.append(text[last:])
    return "".join(pieces)


def has_mirror_links(text: str, rules: Iterable[MirrorRule] = MIRROR_RULES) -> bool:
    rules = tuple(rules)
    for span in find_url_spans(text):
        url = parse_url(span.text)
        if url is not None and find_rule(url.host, rules) is not None:
            return True
    return False
