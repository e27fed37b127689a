"""Tests for Markdown front matter and inline tag parsing."""

from workflows import find_inline_tags, parse_document, split_front_matter


DOC = """---
Archived: true
tags: [project, "#Done"]
---
# Heading

Body text #inline and #123 and `#code` and foo#bar.

```
#fenced
```
#after-fence
"""


class TestSplitFrontMatter:
    
    def test_block_and_body(self):
        block, body = split_front_matter("---\na: 1\n---\nbody\n")
        assert block == "a: 1\n"
        assert body == "body\n"
    
    def test_no_front_matter(self):
        block, body = split_front_matter("just text\n---\n")
        assert block is None
        assert body == "just text\n---\n"
    
    def test_unclosed_block(self):
        block, body = split_front_matter("---\na: 1\n")
        assert block is None
    
    def test_byte_order_mark(self):
        block, _ = split_front_matter("\ufeff---\na: 1\n---\n")
        assert block == "a: 1\n"


class TestParseDocument:
    
    def test_fields_and_tags(self):
        fields, tags = parse_document(DOC)
        assert fields == {"Archived": True, "tags": ["project", "#Done"]}
        assert tags == ["inline", "after-fence"]
    
    def test_malformed_yaml_gives_no_fields(self):
        fields, _ = parse_document("---\nArchived: [true\n---\n")
        assert fields == {}
    
    def test_non_mapping_front_matter(self):
        fields, _ = parse_document("---\n- a\n- b\n---\n")
        assert fields == {}
    
    def test_empty_front_matter(self):
        fields, tags = parse_document("---\n---\n#archived\n")
        assert fields == {}
        assert tags == ["archived"]
    
    def test_non_string_keys_become_strings(self):
        fields, _ = parse_document("---\n1: one\n---\n")
        assert fields == {"1": "one"}


class TestInlineTags:
    
    def test_heading_is_not_a_tag(self):
        assert find_inline_tags("# Title\n## Sub\n") == []
    
    def test_nested_tag(self):
        assert find_inline_tags("see #status/archived") == ["status/archived"]
    
    def test_tag_at_line_start(self):
        assert find_inline_tags("#archived") == ["archived"]
