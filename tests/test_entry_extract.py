"""Tests for entry-level extraction."""

from lxml import etree

from feedlens.dialects import descriptors
from feedlens.extract.entry import EntryExtractor

RDF_ITEM = (
    '<item xmlns="http://purl.org/rss/1.0/"'
    ' xmlns:dc="http://purl.org/rss/1.0/modules/dc/"'
    ' xmlns:content="http://purl.org/rss/1.0/modules/content/">{body}</item>'
)
RSS_ITEM = '<item xmlns:content="http://purl.org/rss/1.0/modules/content/">{body}</item>'
ATOM_ENTRY = '<entry xmlns="http://www.w3.org/2005/Atom">{body}</entry>'


def _entry(markup: str, descriptor, diagnostics=None) -> EntryExtractor:
    return EntryExtractor(etree.fromstring(markup), descriptor, diagnostics)


class TestRssEntry:
    """Tests for RSS 2.0 items."""

    def test_description_fallback(self):
        """Should use <description> when there is no content:encoded."""
        entry = _entry(RSS_ITEM.format(body="<description>Hello</description>"), descriptors.RSS2)
        assert entry.content == "Hello"

    def test_encoded_content_preferred(self):
        """Should prefer content:encoded over the description."""
        entry = _entry(
            RSS_ITEM.format(
                body="<description>Brief</description><content:encoded><![CDATA[<p>Full</p>]]></content:encoded>"
            ),
            descriptors.RSS2,
        )
        assert entry.content == "<p>Full</p>"

    def test_empty_encoded_content_falls_through(self):
        """Should skip an empty content:encoded."""
        entry = _entry(
            RSS_ITEM.format(body="<content:encoded></content:encoded><description>Brief</description>"),
            descriptors.RSS2,
        )
        assert entry.content == "Brief"

    def test_fields(self):
        """Should read title, link and pubDate."""
        entry = _entry(
            RSS_ITEM.format(
                body="<title>Deal</title><link>https://example.com/deal</link>"
                "<pubDate>Mon, 20 Dec 2024 10:00:00 -0500</pubDate>"
            ),
            descriptors.RSS2,
        )
        assert entry.title == "Deal"
        assert entry.link == "https://example.com/deal"
        assert entry.pub_date == "Mon, 20 Dec 2024 10:00:00 -0500"

    def test_absent_fields_are_empty_strings(self):
        """Should use the empty string for every missing field."""
        entry = _entry("<item/>", descriptors.RSS2).to_entry()
        assert entry.title == ""
        assert entry.content == ""
        assert entry.pub_date == ""
        assert entry.link == ""

    def test_multiple_titles_warn(self, diagnostics):
        """Should report duplicate titles and use the first."""
        entry = _entry("<item><title>A</title><title>B</title></item>", descriptors.RSS2, diagnostics)
        assert entry.title == "A"
        assert diagnostics.codes() == ["multiple_elements"]


class TestRdfEntry:
    """Tests for RDF family items."""

    def test_namespaced_description_fallback(self):
        """Should fall back to the dialect description as the last resort."""
        entry = _entry(RDF_ITEM.format(body="<description>Body</description>"), descriptors.RDF_10)
        assert entry.content == "Body"

    def test_dc_description_before_rss_description(self):
        """Should prefer dc:description over the dialect description."""
        entry = _entry(
            RDF_ITEM.format(body="<description>Body</description><dc:description>DC</dc:description>"),
            descriptors.RDF_10,
        )
        assert entry.content == "DC"

    def test_encoded_content_first(self):
        """Should prefer content:encoded over both descriptions."""
        entry = _entry(
            RDF_ITEM.format(
                body="<dc:description>DC</dc:description><content:encoded>Full</content:encoded>"
            ),
            descriptors.RDF_10,
        )
        assert entry.content == "Full"

    def test_missing_link_is_empty_string(self):
        """Should return "" rather than a blank for a missing link."""
        entry = _entry(RDF_ITEM.format(body="<title>T</title>"), descriptors.RDF_090)
        assert entry.link == ""

    def test_fields(self):
        """Should read title, link and pubDate through the rss binding."""
        entry = _entry(
            RDF_ITEM.format(body="<title>T</title><link>http://x/</link><pubDate>today</pubDate>"),
            descriptors.RDF_10,
        )
        assert entry.to_entry().title == "T"
        assert entry.link == "http://x/"
        assert entry.pub_date == "today"


class TestAtomEntry:
    """Tests for Atom entries."""

    def test_fields(self):
        """Should read title, content, updated and the alternate link."""
        entry = _entry(
            ATOM_ENTRY.format(
                body='<title>Post</title><link rel="edit" href="http://edit/"/>'
                '<link rel="alternate" href="http://post/"/>'
                "<published>2024-01-01T00:00:00Z</published>"
                "<updated>2024-02-01T00:00:00Z</updated>"
                "<content>Body</content>"
            ),
            descriptors.ATOM,
        )
        assert entry.title == "Post"
        assert entry.link == "http://post/"
        assert entry.content == "Body"

    def test_pub_date_uses_updated_only(self):
        """Should never fall back to <published>."""
        with_updated = _entry(
            ATOM_ENTRY.format(
                body="<published>2024-01-01T00:00:00Z</published><updated>2024-02-01T00:00:00Z</updated>"
            ),
            descriptors.ATOM,
        )
        published_only = _entry(
            ATOM_ENTRY.format(body="<published>2024-01-01T00:00:00Z</published>"),
            descriptors.ATOM,
        )
        assert with_updated.pub_date == "2024-02-01T00:00:00Z"
        assert published_only.pub_date == ""

    def test_bare_link(self):
        """Should treat a link without rel as the alternate link."""
        entry = _entry(
            ATOM_ENTRY.format(body='<link rel="enclosure" href="http://file/"/><link href="http://bare/"/>'),
            descriptors.ATOM,
        )
        assert entry.link == "http://bare/"

    def test_xhtml_content_text(self):
        """Should return the text value of structured content."""
        entry = _entry(
            ATOM_ENTRY.format(
                body='<content type="xhtml"><div xmlns="http://www.w3.org/1999/xhtml">Hi <b>there</b></div></content>'
            ),
            descriptors.ATOM,
        )
        assert entry.content == "Hi there"

    def test_to_entry_equality(self):
        """Should compare snapshots field by field."""
        markup = ATOM_ENTRY.format(body="<title>Same</title>")
        assert _entry(markup, descriptors.ATOM).to_entry() == _entry(markup, descriptors.ATOM).to_entry()
