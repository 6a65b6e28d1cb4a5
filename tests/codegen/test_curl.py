"""
Tests for the curl command generator.
"""

from request_explorer.codegen import RequestDescriptor, render


def test_post_with_json_body(post_json):
    assert render(post_json, "curl") == (
        'curl -X POST "https://api.test/x" \\\n'
        '  -H "Content-Type: application/json" \\\n'
        "  -d '{\"a\":1}'"
    )


def test_get_without_headers_is_one_line(get_with_body):
    assert render(get_with_body, "curl") == 'curl -X GET "https://x"'


def test_multiple_headers_get_one_continuation_each():
    descriptor = RequestDescriptor.create(
        "GET", "https://x", [("Accept", "*/*"), ("X-Trace", "1")]
    )
    assert render(descriptor, "curl") == (
        'curl -X GET "https://x" \\\n'
        '  -H "Accept: */*" \\\n'
        '  -H "X-Trace: 1"'
    )


def test_empty_body_is_still_sent():
    descriptor = RequestDescriptor.create("PUT", "https://x", [], "")
    assert render(descriptor, "curl") == "curl -X PUT \"https://x\" \\\n  -d ''"


def test_single_quotes_in_body_survive_the_shell():
    descriptor = RequestDescriptor.create("POST", "https://x", [], "it's")
    assert render(descriptor, "curl").endswith("-d 'it'\\''s'")


def test_double_quotes_in_header_key_are_escaped():
    descriptor = RequestDescriptor.create("GET", "https://x", [('X-"Q"', "v")])
    assert '-H "X-\\"Q\\": v"' in render(descriptor, "curl")


def test_shell_alias():
    descriptor = RequestDescriptor.create("DELETE", "https://x/1")
    assert render(descriptor, "shell") == 'curl -X DELETE "https://x/1"'
