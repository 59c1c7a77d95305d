from tests.data import TOPICS


class TestGetTopics:
    def test_responds_with_all_topics(self, client):
        r = client.get("/api/topics")
        assert r.status_code == 200
        topics = r.json()["topics"]
        assert len(topics) == len(TOPICS)
        for topic in topics:
            assert set(topic) == {"slug", "description"}

    def test_topics_are_ordered_by_slug(self, client):
        topics = client.get("/api/topics").json()["topics"]
        assert [t["slug"] for t in topics] == ["cats", "mitch", "paper"]
        assert topics[1]["description"] == "The man, the Mitch, the legend"

    def test_misspelled_path_is_invalid(self, client):
        r = client.get("/api/tropics")
        assert r.status_code == 404
        assert r.json() == {"msg": "Invalid path"}
