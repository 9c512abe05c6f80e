from werkzeug.security import generate_password_hash

from snippetbox.extensions import db
from snippetbox.models import Comment, User
from snippetbox.services import insert_comment


def login(client, username="testuser", password="password123"):
    return client.post(
        "/login",
        data={"username": username, "password": password},
        follow_redirects=False
    )


def test_add_comment_uses_current_user_as_author(app, client, user_id):
    login(client)

    resp = client.post("/snippet/3/comment", data={"content": "Hello"}, follow_redirects=False)
    assert resp.status_code == 302

    with app.app_context():
        comment = Comment.query.filter_by(snippet_id=3).first()
        assert comment is not None
        assert comment.author == "testuser"
        assert comment.content == "Hello"


def test_empty_comment_is_rejected(app, client, user_id):
    login(client)

    client.post("/snippet/3/comment", data={"content": "   "})

    with app.app_context():
        assert Comment.query.count() == 0


def test_add_comment_requires_login(app, client):
    resp = client.post("/snippet/3/comment", data={"content": "anon"})
    assert resp.status_code == 302

    with app.app_context():
        assert Comment.query.count() == 0


def test_snippet_comments_page_lists_comments(app, client):
    with app.app_context():
        insert_comment(snippet_id=5, author="alice", content="first!")

    resp = client.get("/snippet/5/comments")
    assert resp.status_code == 200
    assert b"first!" in resp.data


def test_author_can_edit_comment(app, client, user_id):
    login(client)
    with app.app_context():
        comment_id = insert_comment(snippet_id=1, author="testuser", content="typo")

    resp = client.post(f"/comment/{comment_id}/edit", data={"content": "fixed"})
    assert resp.status_code == 302

    with app.app_context():
        assert db.session.get(Comment, comment_id).content == "fixed"


def test_other_user_cannot_delete_comment(app, client, user_id):
    login(client)
    with app.app_context():
        comment_id = insert_comment(snippet_id=1, author="someone_else", content="mine")

    client.post(f"/comment/{comment_id}/delete")

    with app.app_context():
        assert db.session.get(Comment, comment_id) is not None


def test_author_can_delete_comment(app, client, user_id):
    login(client)
    with app.app_context():
        comment_id = insert_comment(snippet_id=1, author="testuser", content="oops")

    client.post(f"/comment/{comment_id}/delete")

    with app.app_context():
        assert db.session.get(Comment, comment_id) is None


def test_edit_missing_comment_is_404(client, user_id):
    login(client)
    resp = client.get("/comment/999/edit")
    assert resp.status_code == 404


def test_vote_endpoints_return_message_and_count(app, client, user_id):
    login(client)
    with app.app_context():
        comment_id = insert_comment(snippet_id=1, author="alice", content="vote")

    resp = client.post(f"/comment/{comment_id}/upvote")
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "message": "Vote successfully registered!", "upvotes": 1}

    resp = client.post(f"/comment/{comment_id}/downvote")
    assert resp.get_json() == {"success": True, "message": "Vote updated to downvote!", "upvotes": -1}


def test_votes_from_two_users(app, client, user_id):
    with app.app_context():
        db.session.add(User(username="second", password_hash=generate_password_hash("password123")))
        db.session.commit()
        comment_id = insert_comment(snippet_id=1, author="alice", content="vote")

    login(client)
    client.post(f"/comment/{comment_id}/upvote")
    client.get("/logout")

    login(client, username="second")
    resp = client.post(f"/comment/{comment_id}/upvote")
    assert resp.get_json()["upvotes"] == 2


def test_vote_on_missing_comment_is_404(client, user_id):
    login(client)
    resp = client.post("/comment/999/upvote")
    assert resp.status_code == 404
    assert resp.get_json() == {"success": False, "reason": "not_found"}


def test_anonymous_visitors_see_count_but_no_vote_buttons(app, client):
    with app.app_context():
        comment_id = insert_comment(snippet_id=6, author="alice", content="read only")

    resp = client.get("/snippet/6/comments")
    assert resp.status_code == 200
    assert b'class="upvotes">0<' in resp.data
    assert f"/comment/{comment_id}/upvote".encode() not in resp.data
    assert f"/comment/{comment_id}/downvote".encode() not in resp.data


def test_logged_in_users_see_vote_buttons(app, client, user_id):
    login(client)
    with app.app_context():
        comment_id = insert_comment(snippet_id=6, author="alice", content="votable")

    resp = client.get("/snippet/6/comments")
    assert f"/comment/{comment_id}/upvote".encode() in resp.data
    assert f"/comment/{comment_id}/downvote".encode() in resp.data
