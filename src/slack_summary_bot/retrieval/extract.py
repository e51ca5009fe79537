import re

# Script/style elements are removed with their content before tags are stripped
SCRIPT_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
STYLE_RE = re.compile(r"<style\b[^<]*(?:(?!</style>)<[^<]*)*</style>", re.IGNORECASE)
TAG_RE = re.compile(r"<[^>]+>")
WHITESPACE_RE = re.compile(r"\s+")

def html_to_text(html: str) -> str:
    """
    Strips markup from HTML and returns plain text with whitespace collapsed.
    No boilerplate removal; HTML entities are left as-is.
    """
    text = SCRIPT_RE.sub("", html)
    text = STYLE_RE.sub("", text)
    text = TAG_RE.sub(" ", text)
    text = WHITESPACE_RE.sub(" ", text)
    return text.strip()
