from nc_news import crud


def test_get_article_returns_none_when_absent(db):
    assert crud.get_article(db, article_id=999) is None


def test_increment_returns_updated_row(db):
    article = crud.increment_article_votes(db, article_id=1, inc_votes=15)
    assert article.article_id == 1
    assert article.votes == 115


def test_increment_returns_none_when_absent(db):
    assert crud.increment_article_votes(db, article_id=999, inc_votes=1) is None


def test_increment_is_evaluated_by_the_database(db):
    # A stale in-memory copy must not be written back over a newer value
    stale = crud.get_article(db, article_id=2)
    crud.increment_article_votes(db, article_id=2, inc_votes=3)
    crud.increment_article_votes(db, article_id=2, inc_votes=4)
    db.refresh(stale)
    assert stale.votes == 7


def test_get_topics(db):
    assert [t.slug for t in crud.get_topics(db)] == ["cats", "mitch", "paper"]
