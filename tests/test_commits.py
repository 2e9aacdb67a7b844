"""Tests for docbump.commits."""

from __future__ import annotations

import pytest

from docbump.commits import (
    analyse_version_change,
    get_related_git_commits,
    message_matches,
    normalize_path,
    split_labels,
)
from docbump.exceptions import NoHistoryFoundError
from docbump.models import BumpDecision, CommitRecord


class TestNormalizePath:
    def test_strips_workspace_root(self) -> None:
        assert normalize_path("/repo/api/asyncapi.json", "/repo") == "api/asyncapi.json"

    def test_root_with_trailing_slash(self) -> None:
        assert normalize_path("/repo/asyncapi.json", "/repo/") == "asyncapi.json"

    def test_relative_path_kept(self) -> None:
        assert normalize_path("./asyncapi.json", "/repo") == "asyncapi.json"

    def test_no_root(self) -> None:
        assert normalize_path("components/test.json") == "components/test.json"

    def test_path_outside_root_kept(self) -> None:
        assert normalize_path("/elsewhere/a.json", "/repo") == "/elsewhere/a.json"

    def test_sibling_prefix_not_stripped(self) -> None:
        assert normalize_path("/repo2/a.json", "/repo") == "/repo2/a.json"


class TestGetRelatedGitCommits:
    def test_empty_history_is_fatal(self) -> None:
        with pytest.raises(NoHistoryFoundError):
            get_related_git_commits("asyncapi.json", [], [], "")

    def test_empty_history_is_fatal_regardless_of_paths(self) -> None:
        with pytest.raises(NoHistoryFoundError):
            get_related_git_commits("/repo/x.json", ["/repo/y.json"], [], "/repo")

    def test_commit_touching_target(self) -> None:
        history = [CommitRecord(message="m", modified_paths=["asyncapi.json"])]
        assert get_related_git_commits("asyncapi.json", [], history, "") == ["m\n"]

    def test_commit_touching_reference(self) -> None:
        history = [CommitRecord(message="m", modified_paths=["components/test.json"])]
        result = get_related_git_commits(
            "asyncapi.json", ["components/test.json"], history, ""
        )
        assert result == ["m\n"]

    def test_unrelated_commits_give_empty_result(self) -> None:
        history = [CommitRecord(message="m", modified_paths=["README.md"])]
        assert get_related_git_commits("asyncapi.json", [], history, "") == []

    def test_commit_counted_once(self) -> None:
        history = [
            CommitRecord(
                message="m", modified_paths=["asyncapi.json", "components/test.json"]
            )
        ]
        result = get_related_git_commits(
            "asyncapi.json", ["components/test.json"], history, ""
        )
        assert result == ["m\n"]

    def test_preserves_order(self) -> None:
        history = [
            CommitRecord(message="first\n", modified_paths=["asyncapi.json"]),
            CommitRecord(message="skip\n", modified_paths=["other.txt"]),
            CommitRecord(message="second\n", modified_paths=["a.json"]),
        ]
        result = get_related_git_commits("asyncapi.json", ["a.json"], history, "")
        assert result == ["first\n", "second\n"]

    def test_existing_newline_kept_verbatim(self) -> None:
        history = [
            CommitRecord(message="feat: x\n\nbody\n", modified_paths=["asyncapi.json"])
        ]
        assert get_related_git_commits("asyncapi.json", [], history, "") == [
            "feat: x\n\nbody\n"
        ]

    def test_absolute_and_relative_paths_agree(self) -> None:
        history = [
            CommitRecord(message="a", modified_paths=["api/asyncapi.json"]),
            CommitRecord(message="b", modified_paths=["api/components/c.json"]),
        ]
        absolute = get_related_git_commits(
            "/repo/api/asyncapi.json", ["/repo/api/components/c.json"], history, "/repo"
        )
        relative = get_related_git_commits(
            "api/asyncapi.json", ["api/components/c.json"], history, "/repo"
        )
        assert absolute == relative == ["a\n", "b\n"]


class TestSplitLabels:
    def test_empty(self) -> None:
        assert split_labels("") == []
        assert split_labels(None) == []

    def test_alternatives(self) -> None:
        assert split_labels("feat!, BREAKING ,") == ["feat!", "BREAKING"]


class TestMessageMatches:
    @pytest.mark.parametrize(
        ("message", "label"),
        [
            ("feat: x", "feat"),
            ("feat(api): x", "feat"),
            ("feat!: x", "feat"),
            ("feat!: x", "feat!"),
            ("fix", "fix"),
        ],
    )
    def test_matches(self, message: str, label: str) -> None:
        assert message_matches(message, label)

    @pytest.mark.parametrize(
        ("message", "label"),
        [
            ("feature: x", "feat"),
            ("feat-flag: x", "feat"),
            ("feat: x", "feat!"),
            ("chore: feat", "feat"),
            ("feat: x", ""),
        ],
    )
    def test_does_not_match(self, message: str, label: str) -> None:
        assert not message_matches(message, label)


class TestAnalyseVersionChange:
    def test_major(self) -> None:
        decision = analyse_version_change("feat!", "", "", "", ["feat!: change request"])
        assert decision == BumpDecision(major=True)

    def test_minor_not_captured_by_major_label(self) -> None:
        decision = analyse_version_change("feat!", "feat", "", "", ["feat: change request"])
        assert decision == BumpDecision(minor=True)

    def test_patch(self) -> None:
        decision = analyse_version_change(
            "feat!", "feat", "fix", "", ["fix: change request"]
        )
        assert decision == BumpDecision(patch=True)

    def test_prerelease(self) -> None:
        decision = analyse_version_change(
            "feat!", "feat", "fix", "pre", ["pre: change request"]
        )
        assert decision == BumpDecision(prerelease=True)

    def test_breaking_counts_only_as_major(self) -> None:
        decision = analyse_version_change("feat!", "feat", "", "", ["feat!: change"])
        assert decision == BumpDecision(major=True)

    def test_independent_flags_across_messages(self) -> None:
        decision = analyse_version_change(
            "feat!", "feat", "fix", "", ["fix: a\n", "feat: b\n", "docs: c\n"]
        )
        assert decision == BumpDecision(minor=True, patch=True)
        assert decision.selected == "minor"

    def test_empty_labels_never_match(self) -> None:
        decision = analyse_version_change("", "", "", "", ["feat: x", ": y", ""])
        assert decision == BumpDecision()

    def test_no_messages(self) -> None:
        assert analyse_version_change("feat!", "feat", "fix", "pre", []) == BumpDecision()

    def test_label_alternatives(self) -> None:
        decision = analyse_version_change("feat!,BREAKING", "feat", "", "", ["BREAKING: x"])
        assert decision == BumpDecision(major=True)

    def test_equal_length_labels_use_priority(self) -> None:
        decision = analyse_version_change("feat", "feat", "", "", ["feat: x"])
        assert decision == BumpDecision(major=True)
