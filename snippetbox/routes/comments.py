from flask import render_template, flash, redirect, url_for, request, jsonify, abort
from flask_login import current_user, login_required

from snippetbox.routes import bp
from snippetbox.models import RecordNotFound
from snippetbox.services import (
    insert_comment,
    get_comments_by_snippet,
    get_comment,
    update_comment,
    delete_comment,
    upvote_comment,
    downvote_comment,
)

MAX_CONTENT_LEN = 2000


def _load_comment_or_404(comment_id: int):
    try:
        return get_comment(comment_id)
    except RecordNotFound:
        abort(404)


@bp.route('/snippet/<int:snippet_id>/comments')
def snippet_comments(snippet_id: int):
    comments = get_comments_by_snippet(snippet_id)
    return render_template('comments.html', snippet_id=snippet_id, comments=comments)


@bp.route('/snippet/<int:snippet_id>/comment', methods=['POST'])
@login_required
def add_comment(snippet_id: int):
    content = request.form.get('content', "").strip()

    if not content:
        flash("Comment is empty.", "warning")
    elif len(content) > MAX_CONTENT_LEN:
        flash("Comment is too long.", "danger")
    else:
        insert_comment(snippet_id=snippet_id, author=current_user.username, content=content)
        flash("Comment added.", "success")

    return redirect(url_for('routes.snippet_comments', snippet_id=snippet_id))


@bp.route('/comment/<int:comment_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_comment(comment_id: int):
    comment = _load_comment_or_404(comment_id)

    if comment.author != current_user.username:
        flash("You cannot edit someone else's comment!", "danger")
        return redirect(url_for('routes.snippet_comments', snippet_id=comment.snippet_id))

    if request.method == 'POST':
        content = request.form.get('content', "").strip()
        if not content:
            flash("Comment is empty.", "warning")
            return render_template('comment_edit.html', comment=comment)
        if len(content) > MAX_CONTENT_LEN:
            flash("Comment is too long.", "danger")
            return render_template('comment_edit.html', comment=comment)

        snippet_id = comment.snippet_id
        update_comment(comment_id, content)
        flash("Comment updated.", "success")
        return redirect(url_for('routes.snippet_comments', snippet_id=snippet_id))

    return render_template('comment_edit.html', comment=comment)


@bp.route('/comment/<int:comment_id>/delete', methods=['POST'])
@login_required
def delete_comment_route(comment_id: int):
    comment = _load_comment_or_404(comment_id)
    snippet_id = comment.snippet_id

    if comment.author != current_user.username:
        flash("You cannot delete someone else's comment!", "danger")
    else:
        delete_comment(comment_id)
        flash("Comment deleted.", "success")

    return redirect(url_for('routes.snippet_comments', snippet_id=snippet_id))


# votes
def _vote(comment_id: int, vote):
    try:
        get_comment(comment_id)
    except RecordNotFound:
        return jsonify({"success": False, "reason": "not_found"}), 404

    message = vote(comment_id=comment_id, user_id=current_user.id)
    comment = get_comment(comment_id)
    return jsonify({"success": True, "message": message, "upvotes": comment.upvotes})


@bp.route('/comment/<int:comment_id>/upvote', methods=['POST'])
@login_required
def upvote_comment_route(comment_id: int):
    return _vote(comment_id, upvote_comment)


@bp.route('/comment/<int:comment_id>/downvote', methods=['POST'])
@login_required
def downvote_comment_route(comment_id: int):
    return _vote(comment_id, downvote_comment)
