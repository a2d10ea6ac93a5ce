#!/usr/bin/env python3

import pytest

from rabobank_hledger import output


def test_output_path():
    assert output.basename("dir/export.csv") == "dir/export"
    assert output.basename("export") == "export"
    assert (
        output.output_path("dir/export", "NL01RABO0123456789")
        == "dir/export#NL01RABO0123456789.journal"
    )
    assert output.output_path("export", "") == "export#.journal"


def test_route_deletes_existing_file_once(tmp_path):
    base = str(tmp_path / "export")
    journal = tmp_path / "export#A.journal"
    journal.write_text("sentinel\n")

    context = output.RunContext()
    assert context.route(base, "A", "first\n") == "A"
    assert context.route(base, "A", "second\n") == "A"

    assert journal.read_text() == "first\nsecond\n"
    assert context.truncated == {str(journal)}


def test_route_shares_truncation_across_inputs(tmp_path):
    context = output.RunContext()
    base = str(tmp_path / "export")
    context.route(base, "A", "one\n")

    # a second input file of the same run mapping onto the same journal
    context.route(base, "A", "two\n")
    assert (tmp_path / "export#A.journal").read_text() == "one\ntwo\n"

    # a new run starts over
    output.RunContext().route(base, "A", "three\n")
    assert (tmp_path / "export#A.journal").read_text() == "three\n"


def test_route_keeps_accounts_apart(tmp_path):
    context = output.RunContext()
    base = str(tmp_path / "export")
    context.route(base, "A", "a\n")
    context.route(base, "B", "b\n")
    assert (tmp_path / "export#A.journal").read_text() == "a\n"
    assert (tmp_path / "export#B.journal").read_text() == "b\n"


def test_route_filesystem_errors_are_fatal(tmp_path):
    base = str(tmp_path / "missing_dir" / "export")
    with pytest.raises(OSError):
        output.RunContext().route(base, "A", "a\n")
