"""Tests for the parse entry point."""

import io
import logging

import pytest
from justhtml import JustHTML

import justhtml_filter.parser as parser_module
from justhtml_filter import NoMatchError, Node, NodeType, parse
from justhtml_filter.predicates import has_class, tag


class TestParse:
    def test_without_predicates_returns_document(self):
        node = parse("<p>x</p>")
        assert node.type == NodeType.DOCUMENT
        assert node.depth == 0
        assert node.offset == 0

    def test_first_div(self):
        node = parse("<div>A<div>B</div></div>", tag("div"))
        assert node.inner_html() == "A<div>B</div>"
        assert node.depth == 3

    def test_chain(self):
        node = parse('<div class="x"><p>1</p></div><div class="y"><p>2</p></div>', has_class("y"), tag("p"))
        assert node.outer_html() == "<p>2</p>"
        assert node.match.get_attr_val("", "class") == "y"

    def test_no_match(self):
        with pytest.raises(NoMatchError) as exc_info:
            parse("<p>x</p>", tag("table"))
        assert exc_info.value.node == Node()
        assert isinstance(exc_info.value, LookupError)

    def test_stream_source(self):
        node = parse(io.StringIO("<ul><li>a</li></ul>"), tag("li"))
        assert node.outer_text() == "a"

    def test_keeps_every_attribute(self):
        node = parse('<div one="value_1" data-x="2"></div>', tag("div"))
        assert node.get_attr_val("", "ONE") == "value_1"
        assert node.get_attr_val("", "data-x") == "2"

    def test_keeps_comments_and_form_controls(self):
        node = parse("<p>x<!--c--><input disabled></p>", tag("p"))
        assert node.outer_html() == "<p>x<!--c--><input disabled></p>"

    def test_bytes_source(self):
        node = parse("<p>café</p>".encode(), tag("p"), encoding="utf-8")
        assert node.outer_text() == "café"

    def test_bytes_with_meta_charset(self):
        source = '<meta charset="utf-8"><p>naïve</p>'.encode()
        assert parse(source, tag("p")).outer_text() == "naïve"


class TestErrors:
    def test_closed_stream(self):
        stream = io.StringIO("<p>x</p>")
        stream.close()
        with pytest.raises(ValueError):
            parse(stream)

    def test_read_failure_propagates(self):
        class Broken:
            def read(self):
                raise OSError("disk on fire")

        with pytest.raises(OSError, match="disk on fire"):
            parse(Broken())

    def test_parser_failure_propagates(self, monkeypatch):
        def explode(html, **options):
            raise RuntimeError("parser failed")

        monkeypatch.setattr(parser_module, "JustHTML", explode)
        with pytest.raises(RuntimeError, match="parser failed"):
            parse("<p>x</p>")

    def test_predicate_failure_propagates(self):
        def broken(node):
            raise KeyError("predicate")

        with pytest.raises(KeyError):
            parse("<p>x</p>", broken)


class TestOptions:
    def test_options_are_forwarded(self, monkeypatch):
        calls = []

        def recording(html, **options):
            calls.append((html, options))
            return JustHTML(html, **options)

        monkeypatch.setattr(parser_module, "JustHTML", recording)
        parse("<p>x</p>", tag("p"), collect_errors=True, encoding="utf-8")
        assert calls == [("<p>x</p>", {"collect_errors": True, "encoding": "utf-8", "sanitize": False})]

    def test_sanitize_can_be_turned_back_on(self, monkeypatch):
        calls = []

        def recording(html, **options):
            calls.append(options)
            return JustHTML(html, **options)

        monkeypatch.setattr(parser_module, "JustHTML", recording)
        parse("<p>x</p>", tag("p"), sanitize=True)
        assert calls == [{"sanitize": True}]

    def test_debug_logging(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="justhtml_filter"):
            with pytest.raises(NoMatchError):
                parse("<p>x</p>", tag("table"))
        messages = [record.getMessage() for record in caplog.records]
        assert any("Parsing str input" in message for message in messages)
        assert any("No node matched" in message for message in messages)
