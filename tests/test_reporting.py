"""Tests for the most-active-commenters report."""
from datetime import datetime, timezone
from unittest.mock import patch

import pytest
from bson import ObjectId


def seed_comments(db, counts):
    movie = ObjectId()
    docs = []
    for email, count in counts.items():
        for i in range(count):
            docs.append({
                "name": email.split("@")[0],
                "email": email,
                "movie_id": movie,
                "text": f"comment {i}",
                "date": datetime.now(timezone.utc),
            })
    db.comments.insert_many(docs)


class TestMostActiveCommenters:
    def test_ordered_by_count(self, layer, db):
        seed_comments(db, {"a@example.com": 5, "b@example.com": 3, "c@example.com": 8})
        report = layer.reporting.most_active_commenters()
        assert [(r.email, r.count) for r in report] == [
            ("c@example.com", 8),
            ("a@example.com", 5),
            ("b@example.com", 3),
        ]

    def test_truncated_to_limit(self, layer, db):
        seed_comments(db, {f"user{i}@example.com": i + 1 for i in range(25)})
        report = layer.reporting.most_active_commenters()
        assert len(report) == 20
        assert report[0].email == "user24@example.com"
        assert report[0].count == 25

    def test_explicit_limit(self, layer, db):
        seed_comments(db, {"a@example.com": 5, "b@example.com": 3, "c@example.com": 8})
        report = layer.reporting.most_active_commenters(limit=2)
        assert [r.email for r in report] == ["c@example.com", "a@example.com"]

    def test_empty_collection(self, layer):
        assert layer.reporting.most_active_commenters() == []

    @pytest.mark.parametrize("limit", [0, -1])
    def test_rejects_non_positive_limit(self, layer, limit):
        with pytest.raises(ValueError):
            layer.reporting.most_active_commenters(limit=limit)

    def test_reads_at_majority(self, layer, db):
        seed_comments(db, {"a@example.com": 2})
        collection = layer.comments.collection
        with patch.object(collection, "with_options", wraps=collection.with_options) as with_options:
            report = layer.reporting.most_active_commenters()
        assert [r.email for r in report] == ["a@example.com"]
        assert with_options.call_args.kwargs["read_concern"].level == "majority"
