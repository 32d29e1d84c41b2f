"""Tests for git_hooks.classify."""

from git_hooks.classify import classify, is_excluded, without_excluded


class TestClassify:
    def test_partitions_by_suffix_in_order(self):
        buckets = classify(["b.py", "cmd/main.go", "a.py", "pkg/x.go"])
        assert buckets["python"] == ["b.py", "a.py"]
        assert buckets["go"] == ["cmd/main.go", "pkg/x.go"]

    def test_unknown_suffixes_are_dropped(self):
        buckets = classify(["README.md", "setup.cfg", "script.pyc", "go.mod"])
        assert buckets == {"python": [], "go": []}

    def test_every_language_has_a_bucket(self):
        assert classify([]) == {"python": [], "go": []}


class TestExclusion:
    def test_protobuf_files_match_by_basename(self):
        assert is_excluded("api/v1/service_pb2.py", ["*_pb2.py"])
        assert is_excluded("service_pb2_grpc.py", ["*_pb2.py", "*_pb2_grpc.py"])

    def test_full_path_patterns(self):
        assert is_excluded("migrations/0001_initial.py", ["migrations/*.py"])
        assert not is_excluded("app/models.py", ["migrations/*.py"])

    def test_without_excluded_keeps_order(self):
        files = ["z.py", "gen/a_pb2.py", "a.py"]
        assert without_excluded(files, ["*_pb2.py"]) == ["z.py", "a.py"]
