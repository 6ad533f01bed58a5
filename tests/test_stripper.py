from __future__ import annotations

import unittest

from striptags import TagStripper, strip_tags


class TestStripTags(unittest.TestCase):
    def test_should_not_strip_invalid_tags(self) -> None:
        assert strip_tags("lorem ipsum < a> < div>") == "lorem ipsum < a> < div>"

    def test_should_remove_simple_html_tags(self) -> None:
        assert strip_tags('<a href="">lorem <strong>ipsum</strong></a>') == "lorem ipsum"

    def test_should_remove_comments(self) -> None:
        assert strip_tags("<!-- lorem -- ipsum -- --> dolor sit amet") == " dolor sit amet"

    def test_should_strip_tags_within_comments(self) -> None:
        assert strip_tags("<!-- <strong>lorem ipsum</strong> --> dolor sit") == " dolor sit"

    def test_should_not_fail_with_nested_quotes(self) -> None:
        assert strip_tags("<article attr=\"foo 'bar'\">lorem</article> ipsum") == "lorem ipsum"

    def test_should_strip_extra_within_tags(self) -> None:
        assert strip_tags("<div<>>lorem ipsum</div>") == "lorem ipsum"

    def test_should_strip_within_quotes(self) -> None:
        assert strip_tags('<a href="<script>">lorem ipsum</a>') == "lorem ipsum"

    def test_empty_input(self) -> None:
        assert strip_tags("") == ""

    def test_plain_text_is_unchanged(self) -> None:
        text = "lorem > ipsum & dolor\n\tsit \"amet\" -- 'x'"
        assert strip_tags(text) == text

    def test_script_content_is_text(self) -> None:
        # Only the tags go; the element body is plain text to the scanner.
        assert strip_tags("<script>alert(1)</script>ok") == "alert(1)ok"

    def test_unicode_text_is_preserved(self) -> None:
        assert strip_tags("<b>héllo ✓</b> 日本<br/>") == "héllo ✓ 日本"

    def test_doctype_and_processing_instruction_are_tags(self) -> None:
        html = '<?xml version="1.0"?><!DOCTYPE html><p>text</p>'
        assert strip_tags(html) == "text"


class TestBareOpenBracket(unittest.TestCase):
    def test_tab_and_newline_become_a_space(self) -> None:
        assert strip_tags("a <\tb") == "a < b"
        assert strip_tags("a <\nb") == "a < b"
        assert strip_tags("a <\rb") == "a < b"

    def test_whitespace_after_tag_name_stays_in_tag(self) -> None:
        assert strip_tags("<a  href='x' >b</a >") == "b"

    def test_trailing_open_bracket_is_swallowed(self) -> None:
        assert strip_tags("text <") == "text "

    def test_bracket_after_bare_bracket_opens_tag(self) -> None:
        assert strip_tags("< <b>x") == "< x"


class TestUnterminated(unittest.TestCase):
    def test_unterminated_tag_swallows_rest(self) -> None:
        assert strip_tags("lorem <div class='x' ipsum") == "lorem "

    def test_unterminated_quote_swallows_rest(self) -> None:
        assert strip_tags('lorem <a title="x>ipsum</a> dolor') == "lorem "

    def test_unterminated_comment_swallows_rest(self) -> None:
        assert strip_tags("lorem <!-- ipsum <b>dolor</b>") == "lorem "


class TestQuotes(unittest.TestCase):
    def test_close_bracket_inside_quotes_does_not_close(self) -> None:
        assert strip_tags('<img alt="a > b">after') == "after"

    def test_open_bracket_inside_quotes_does_not_nest(self) -> None:
        assert strip_tags('<a title="<<">x</a>') == "x"

    def test_single_quotes_delimit_values(self) -> None:
        assert strip_tags("<a title='1 > 0'>x</a>") == "x"

    def test_other_quote_inside_value_is_inert(self) -> None:
        assert strip_tags("<a title='say \"hi\">x' >y</a>") == "y"

    def test_quotes_outside_tags_are_text(self) -> None:
        assert strip_tags("\"<b>x</b>'") == "\"x'"


class TestNesting(unittest.TestCase):
    def test_nested_brackets_need_matching_close(self) -> None:
        assert strip_tags("<<a>>text") == "text"

    def test_missing_close_keeps_tag_open(self) -> None:
        assert strip_tags("<<a>text") == ""

    def test_extra_close_bracket_is_text(self) -> None:
        assert strip_tags("<a>>b") == ">b"

    def test_depth_carries_over_bare_bracket(self) -> None:
        # The nested "<" counted before the reclassified "< " is still pending,
        # so the next tag needs one extra ">" to close.
        assert strip_tags("<< a>b<i>c") == "< a>b"


class TestComments(unittest.TestCase):
    def test_empty_comment(self) -> None:
        assert strip_tags("<!---->x") == "x"

    def test_opener_dashes_count_toward_close(self) -> None:
        assert strip_tags("<!-->x") == "x"
        assert strip_tags("<!--->x") == "x"

    def test_single_dash_declaration_is_a_tag(self) -> None:
        assert strip_tags("<!->x") == "x"

    def test_single_dash_before_close_does_not_close(self) -> None:
        assert strip_tags("<!-- a -> b --> c") == " c"

    def test_close_check_only_sees_text_since_last_bracket(self) -> None:
        assert strip_tags("<!-- a ->-> b --> c") == " c"

    def test_comment_opener_only_at_tag_start(self) -> None:
        assert strip_tags("<a-!--b>x") == "x"
        assert strip_tags('<a title="<!--">x</a>') == "x"

    def test_quotes_inside_comment_are_inert(self) -> None:
        assert strip_tags("<!-- \" --> x") == " x"


class TestTagStripper(unittest.TestCase):
    def test_instance_can_be_reused(self) -> None:
        stripper = TagStripper()
        assert stripper.run("<a>x</a>") == "x"
        assert stripper.run("y") == "y"
        assert stripper.run("") == ""

    def test_closed_input_ends_in_plaintext(self) -> None:
        stripper = TagStripper()
        stripper.run("<p>done</p>")
        assert stripper.state == TagStripper.PLAINTEXT
        assert stripper.depth == 0
        assert stripper.quote_char is None
        assert stripper.tag_buffer == []

    def test_unterminated_tag_state_is_visible(self) -> None:
        stripper = TagStripper()
        assert stripper.run("text <div class='a") == "text "
        assert stripper.state == TagStripper.TAG
        assert stripper.quote_char == "'"
        assert "".join(stripper.tag_buffer) == "<div class='a"

    def test_unterminated_comment_state_is_visible(self) -> None:
        stripper = TagStripper()
        stripper.run("<!-- open")
        assert stripper.state == TagStripper.COMMENT
        assert "".join(stripper.tag_buffer) == "<!-- open"

    def test_nested_depth_is_visible(self) -> None:
        stripper = TagStripper()
        stripper.run("<div<<")
        assert stripper.state == TagStripper.TAG
        assert stripper.depth == 2

    def test_run_resets_previous_state(self) -> None:
        stripper = TagStripper()
        stripper.run("<a title=\"<<x")
        assert stripper.run("plain") == "plain"
        assert stripper.state == TagStripper.PLAINTEXT
        assert stripper.quote_char is None
        assert stripper.depth == 0


if __name__ == "__main__":
    unittest.main()
