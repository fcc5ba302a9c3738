import pytest
from pydaglp.engine.builder import GraphBuilder
from pydaglp.engine.git_log import GitCommitLog
from pydaglp.engine.longest_path import find_longest_path
from pydaglp.engine.parser import parse_records
from pydaglp.interfaces.exceptions import CommitSourceError
from pydaglp.test_utils.helpers import BASE_TIME, commit_at


class TestGitCommitLog:
    def test_lines_are_topologically_ordered(self, merged_history_repo):
        repo, hashes = merged_history_repo
        lines = list(GitCommitLog(repo).lines())

        assert len(lines) == 7
        first = lines[0].split()
        assert first[0] == hashes["M"]
        assert first[1] == str(BASE_TIME + 4000)
        assert first[2:] == [hashes["C"], hashes["F3"]]

        positions = {line.split()[0]: i for i, line in enumerate(lines)}
        for line in lines:
            commit, _, *parents = line.split()
            assert all(positions[commit] < positions[p] for p in parents)

    def test_longest_path_through_feature_branch(self, merged_history_repo):
        repo, hashes = merged_history_repo
        builder = GraphBuilder()
        store = builder.build(parse_records(GitCommitLog(repo).lines()))
        path = find_longest_path(store, builder.end)

        assert [n.identifier for n in path] == [hashes[k] for k in ("A", "F1", "F2", "F3", "M")]
        assert [n.timestamp - BASE_TIME for n in path] == [1000, 1500, 1600, 1700, 4000]

    def test_rev_selects_start(self, merged_history_repo):
        repo, hashes = merged_history_repo
        lines = list(GitCommitLog(repo).lines(hashes["C"]))
        assert [line.split()[0] for line in lines] == [hashes["C"], hashes["B"], hashes["A"]]

    def test_committer_timestamps(self, git_workspace):
        commit_at(git_workspace, "only", BASE_TIME + 1234)
        line = next(GitCommitLog(git_workspace, timestamp_kind="committer").lines())
        assert line.split()[1] == str(BASE_TIME + 1234)

    def test_not_a_repository(self, tmp_path):
        with pytest.raises(CommitSourceError):
            GitCommitLog(tmp_path)

    def test_unknown_timestamp_kind(self, git_workspace):
        with pytest.raises(CommitSourceError):
            GitCommitLog(git_workspace, timestamp_kind="wallclock")

    def test_bad_revision(self, merged_history_repo):
        repo, _ = merged_history_repo
        with pytest.raises(CommitSourceError):
            list(GitCommitLog(repo).lines("no-such-branch"))

    def test_option_like_revision_is_rejected(self, merged_history_repo, tmp_path):
        repo, _ = merged_history_repo
        target = tmp_path / "clobbered.txt"
        with pytest.raises(CommitSourceError):
            list(GitCommitLog(repo).lines(f"--output={target}"))
        assert not target.exists()

    def test_empty_revision_is_rejected(self, merged_history_repo):
        repo, _ = merged_history_repo
        with pytest.raises(CommitSourceError):
            GitCommitLog(repo).log_args("")
