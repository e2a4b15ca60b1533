"""Parses Markdown article sources into ParsedArticle objects.

An article source looks like this:

    ---
    title: Hello
    slug: hello
    date: 2023-01-01
    image: img/hello.jpg
    ---
    Body in **Markdown**.

The front matter block is YAML. Only title, slug, date and image are used;
other keys are ignored and missing keys stay None.
"""
import logging
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Optional, Tuple, Union
import markdown
import yaml
from dateutil import parser as date_parser
from app.errors import ArticleParseError
from app.models import ParsedArticle

logger = logging.getLogger(__name__)

FRONT_MATTER_DELIMITER = "---"

MD_EXTENSIONS = [
    "fenced_code",
    "tables",
]


class _FrontMatterLoader(yaml.SafeLoader):
    """SafeLoader that keeps timestamps as plain strings."""


_FrontMatterLoader.add_constructor(
    "tag:yaml.org,2002:timestamp", yaml.SafeLoader.construct_yaml_str
)


def split_front_matter(text: str, source_path: str = "") -> Tuple[str, str]:
    """Split a document into its front matter block and its body.

    The document must open with a '---' line and the block ends at the next
    line that is exactly '---'.

    Raises:
        ArticleParseError: If either delimiter is missing
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != FRONT_MATTER_DELIMITER:
        raise ArticleParseError(f"Missing front matter in {source_path}", source_path)

    for i in range(1, len(lines)):
        if lines[i].rstrip() == FRONT_MATTER_DELIMITER:
            return "".join(lines[1:i]), "".join(lines[i + 1:])

    raise ArticleParseError(f"Unterminated front matter in {source_path}", source_path)


def load_metadata(meta_text: str, source_path: str = "") -> dict:
    """Load the YAML front matter block into a dict."""
    try:
        meta = yaml.load(meta_text, Loader=_FrontMatterLoader)
    except yaml.YAMLError as e:
        raise ArticleParseError(f"Invalid front matter in {source_path}: {e}", source_path) from e

    if meta is None:
        return {}
    if not isinstance(meta, dict):
        raise ArticleParseError(f"Front matter in {source_path} is not a mapping", source_path)
    return meta


def parse_date(value: Any) -> Optional[datetime]:
    """Convert a front matter date into an aware UTC datetime.

    Accepts date and datetime objects or strings understood by dateutil.
    Naive values are read as UTC. Returns None when the
    value is absent or cannot be parsed.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    else:
        text = str(value).strip()
        try:
            parsed = date_parser.isoparse(text)
        except (ValueError, OverflowError):
            try:
                parsed = date_parser.parse(text)
            except (ValueError, OverflowError):
                logger.debug(f"Unparseable date: {text!r}")
                return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        # Offset pushes the value outside the datetime range, or is over 24h
        logger.debug(f"Date out of range in UTC: {value!r}")
        return None


def render_markdown(text: str) -> str:
    """Render a Markdown body to HTML.

    Output is not sanitized; article authors are trusted.
    """
    return markdown.markdown(text, extensions=MD_EXTENSIONS, output_format="html")


def _text_field(meta: dict, key: str) -> Optional[str]:
    value = meta.get(key)
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


def parse(raw: bytes, source_path: Union[str, Path]) -> ParsedArticle:
    """Parse the raw bytes of one article file.

    Args:
        raw: File contents
        source_path: Path the contents were read from

    Returns:
        ParsedArticle with rendered HTML content

    Raises:
        ArticleParseError: If the file is not UTF-8 or its front matter is
            malformed
    """
    source_path = str(source_path)
    try:
        text = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise ArticleParseError(f"{source_path} is not valid UTF-8: {e}", source_path) from e

    meta_text, body = split_front_matter(text, source_path)
    meta = load_metadata(meta_text, source_path)

    return ParsedArticle(
        title=_text_field(meta, "title"),
        slug=_text_field(meta, "slug"),
        publish_date=parse_date(meta.get("date")),
        image=_text_field(meta, "image"),
        content=render_markdown(body),
        source_path=source_path,
    )
