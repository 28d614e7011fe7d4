"""Tests for BoundaryResolver.

Tests cover:
- Pull request events use the recorded SHAs and ignore overrides
- Push events use before/after with per-end overrides
- Other events query git for HEAD~1 and HEAD, stripping line breaks
- Only unresolved ends are queried
- Query failures propagate
"""

import unittest
from unittest.mock import MagicMock, call

from nxrunner.domain.boundaries import GitBoundaries
from nxrunner.domain.errors import GitRevisionError
from nxrunner.domain.event_context import EventContext, EventKind
from nxrunner.domain.run_config import RunConfig
from nxrunner.services.boundary_resolver import BoundaryResolver
from nxrunner.services.git_operations import GitOperationsService


def make_config(base: str | None = None, head: str | None = None) -> RunConfig:
    return RunConfig(
        targets=("test",),
        base_boundary_override=base,
        head_boundary_override=head,
    )


PR_EVENT = EventContext(
    kind=EventKind.PULL_REQUEST,
    run_id="1",
    pr_base_sha="aaa",
    pr_head_sha="bbb",
    pr_number=42,
)
PUSH_EVENT = EventContext(kind=EventKind.PUSH, run_id="1", push_before="ccc", push_after="ddd")
OTHER_EVENT = EventContext(kind=EventKind.OTHER, run_id="1")


class TestBoundaryResolver(unittest.TestCase):
    """Tests for BoundaryResolver.resolve with a mocked git service."""

    def setUp(self):
        self.mock_git = MagicMock(spec=GitOperationsService)
        self.mock_git.rev_parse.side_effect = lambda revision: {
            "HEAD~1": "1111111\n",
            "HEAD": "2222222\r\n",
        }[revision]
        self.resolver = BoundaryResolver(self.mock_git)

    # --------------------------------------------------------
    # Pull request
    # --------------------------------------------------------

    def test_pull_request_uses_event_shas(self):
        result = self.resolver.resolve(make_config(), PR_EVENT)

        self.assertEqual(result, GitBoundaries(base="aaa", head="bbb"))
        self.mock_git.rev_parse.assert_not_called()

    def test_pull_request_ignores_overrides(self):
        # Pull request payloads are authoritative; overrides are not consulted.
        result = self.resolver.resolve(make_config(base="xxx", head="yyy"), PR_EVENT)

        self.assertEqual(tuple(result), ("aaa", "bbb"))

    # --------------------------------------------------------
    # Push
    # --------------------------------------------------------

    def test_push_uses_before_and_after(self):
        result = self.resolver.resolve(make_config(), PUSH_EVENT)

        self.assertEqual(tuple(result), ("ccc", "ddd"))
        self.mock_git.rev_parse.assert_not_called()

    def test_push_head_override(self):
        result = self.resolver.resolve(make_config(head="eee"), PUSH_EVENT)
        self.assertEqual(tuple(result), ("ccc", "eee"))

    def test_push_base_override(self):
        result = self.resolver.resolve(make_config(base="fff"), PUSH_EVENT)
        self.assertEqual(tuple(result), ("fff", "ddd"))

    # --------------------------------------------------------
    # Other events
    # --------------------------------------------------------

    def test_other_event_queries_git_and_strips_line_breaks(self):
        base, head = self.resolver.resolve(make_config(), OTHER_EVENT)

        self.assertEqual(base, "1111111")
        self.assertEqual(head, "2222222")
        self.assertNotIn("\n", base + head)
        self.assertNotIn("\r", base + head)
        self.mock_git.rev_parse.assert_has_calls([call("HEAD~1"), call("HEAD")])
        self.assertEqual(self.mock_git.rev_parse.call_count, 2)

    def test_other_event_with_base_override_queries_head_only(self):
        result = self.resolver.resolve(make_config(base="origin/main"), OTHER_EVENT)

        self.assertEqual(tuple(result), ("origin/main", "2222222"))
        self.mock_git.rev_parse.assert_called_once_with("HEAD")

    def test_other_event_with_both_overrides_queries_nothing(self):
        result = self.resolver.resolve(make_config(base="b", head="h"), OTHER_EVENT)

        self.assertEqual(tuple(result), ("b", "h"))
        self.mock_git.rev_parse.assert_not_called()

    def test_query_failure_propagates(self):
        self.mock_git.rev_parse.side_effect = GitRevisionError("bad revision")

        with self.assertRaises(GitRevisionError):
            self.resolver.resolve(make_config(), OTHER_EVENT)


if __name__ == "__main__":
    unittest.main()
