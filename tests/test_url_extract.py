import pytest
from slack_summary_bot.retrieval.url import (
    CONTEXT_CHARS,
    MessageParseError,
    ParseErrorKind,
    clean_mention_text,
    extract_url,
    find_urls,
    parse_message,
)
from slack_summary_bot.schemas.messages import IncomingMention

def _mention(text: str, **overrides) -> IncomingMention:
    fields = dict(text=text, user_id="U123456", channel_id="C123456", timestamp="1234567890.123456")
    fields.update(overrides)
    return IncomingMention(**fields)

def test_extract_single_url_with_context():
    """
    WHY: Text around the link often tells us what the user wants from the summary.
    HOW: Mention the bot with a sentence wrapped around one URL.
    EXPECTED: URL matches exactly; context is the trimmed text on each side.
    """
    result = extract_url("<@BOT> Please summarize https://example.com/a for me")
    assert result.url == "https://example.com/a"
    assert result.context_before == "Please summarize"
    assert result.context_after == "for me"

def test_rich_link_keeps_url_and_drops_label():
    """
    WHY: Slack sends pasted links as <url|label>; only the URL is fetchable.
    HOW: Pass a rich link token as the only content.
    EXPECTED: URL without the label; both contexts empty.
    """
    result = extract_url("<@BOT> <https://x.dev/|https://x.dev/>")
    assert result.url == "https://x.dev/"
    assert result.context_before == ""
    assert result.context_after == ""

def test_rich_link_with_surrounding_text():
    result = extract_url("<@U08MJLMBQ9K> look at <https://gigamind.dev/blog|our blog> please")
    assert result.url == "https://gigamind.dev/blog"
    assert result.context_before == "look at"
    assert result.context_after == "please"

def test_url_without_context_yields_empty_strings():
    result = extract_url("<@U08MJLMBQ9K> https://example.com/article")
    assert result.context_before == ""
    assert result.context_after == ""

def test_query_and_fragment_are_kept():
    result = extract_url("<@U08MJLMBQ9K> Check this article https://example.com/article?id=123#section1")
    assert result.url == "https://example.com/article?id=123#section1"

def test_trailing_period_is_swept_into_url():
    """
    WHY: The bare-URL pattern is permissive; pin its known edge so changes are deliberate.
    HOW: End a sentence with a URL followed by a period.
    EXPECTED: The period is part of the URL.
    """
    result = extract_url("<@BOT> Read https://example.com/post.")
    assert result.url == "https://example.com/post."

def test_url_glued_to_non_ascii_text():
    """
    WHY: CJK messages often put no space around a link; the TLD boundary must still be found.
    HOW: Surround a bare URL directly with Chinese text.
    EXPECTED: The URL stops at the TLD and the Chinese text becomes the context.
    """
    result = extract_url("<@BOT> 请看https://example.com谢谢")
    assert result.url == "https://example.com"
    assert result.context_before == "请看"
    assert result.context_after == "谢谢"

def test_no_urls():
    with pytest.raises(MessageParseError) as exc_info:
        extract_url("<@U08MJLMBQ9K> Hello, can you help me?")
    assert exc_info.value.kind == ParseErrorKind.NO_URLS

def test_unrecognized_url_counts_as_no_urls():
    """
    WHY: Something that merely looks like a link (no host with a TLD) is not matched at all.
    HOW: Pass an http URL with escaped spaces and no dot in the host.
    EXPECTED: NO_URLS rather than INVALID_URL.
    """
    with pytest.raises(MessageParseError) as exc_info:
        extract_url("<@U08MJLMBQ9K> Check this: https://invalid\\ url\\ with\\ spaces")
    assert exc_info.value.kind == ParseErrorKind.NO_URLS

def test_multiple_urls_reports_count():
    """
    WHY: We only summarize one article per mention.
    HOW: Mention the bot with two URLs (one bare, one rich link).
    EXPECTED: MULTIPLE_URLS with url_count == 2.
    """
    text = "<@BOT> Compare https://example.com/article1 and <https://example.com/article2|this one>"
    with pytest.raises(MessageParseError) as exc_info:
        extract_url(text)
    assert exc_info.value.kind == ParseErrorKind.MULTIPLE_URLS
    assert exc_info.value.details == {"url_count": 2}

def test_invalid_rich_link_url():
    """
    WHY: The rich-link form accepts anything after the scheme, so validation must catch junk.
    HOW: Rich link whose host contains a space.
    EXPECTED: INVALID_URL carrying the offending string.
    """
    with pytest.raises(MessageParseError) as exc_info:
        extract_url("<@BOT> <https://bad host.com|broken>")
    assert exc_info.value.kind == ParseErrorKind.INVALID_URL
    assert exc_info.value.details == {"url": "https://bad host.com"}

def test_context_is_clamped_to_window():
    before = "a" * 150
    after = "b" * 150
    result = extract_url(f"<@BOT> {before} https://example.com/x {after}")
    assert result.context_before == "a" * (CONTEXT_CHARS - 1)
    assert result.context_after == "b" * (CONTEXT_CHARS - 1)

def test_context_near_edges_is_shorter_than_window():
    result = extract_url("<@BOT> hi https://example.com/x yo")
    assert result.context_before == "hi"
    assert result.context_after == "yo"

def test_unexpected_failure_becomes_parsing_error(monkeypatch):
    """
    WHY: Callers switch on ParseErrorKind; an unclassified exception would break that.
    HOW: Make the URL scanner blow up.
    EXPECTED: PARSING_ERROR with the original exception chained.
    """
    import slack_summary_bot.retrieval.url as url_module

    def boom(_text):
        raise RuntimeError("scanner exploded")

    monkeypatch.setattr(url_module, "find_urls", boom)
    with pytest.raises(MessageParseError) as exc_info:
        extract_url("<@BOT> https://example.com")
    assert exc_info.value.kind == ParseErrorKind.PARSING_ERROR
    assert isinstance(exc_info.value.__cause__, RuntimeError)
    assert "scanner exploded" in exc_info.value.details["original_error"]

def test_clean_mention_text_strips_only_first_mention():
    assert clean_mention_text("<@BOT>   hello <@U999> there ") == "hello <@U999> there"

def test_find_urls_reports_offsets():
    text = "see https://example.com/a now"
    (match,) = find_urls(text)
    assert text[match.start:match.end] == "https://example.com/a"

def test_parse_message_carries_addressing():
    """
    WHY: The handler needs channel/thread information alongside the URL to reply in place.
    HOW: Parse a mention that already lives in a thread.
    EXPECTED: ParsedMessage has one URL, the cleaned text and the thread timestamp.
    """
    parsed = parse_message(_mention("<@BOT> https://example.com/article", thread_ts="1234567890.123457"))
    assert len(parsed.urls) == 1
    assert parsed.full_text == "https://example.com/article"
    assert parsed.thread_ts == "1234567890.123457"
    assert parsed.channel_id == "C123456"
    assert parsed.mention_id == "1234567890.123456"

def test_parse_message_prefers_event_ts_for_mention_id():
    parsed = parse_message(_mention("<@BOT> https://example.com", event_ts="999.000"))
    assert parsed.mention_id == "999.000"
