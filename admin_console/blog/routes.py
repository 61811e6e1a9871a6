"""
Blog Routes

Admin pages around the PostEditor. The editor never touches the database;
the save and cancel callbacks handed to it here do.
"""

import logging

from flask import render_template, request, redirect, url_for, flash, abort
from sqlalchemy.exc import SQLAlchemyError

from admin_console.blog import blog_bp
from admin_console.blog.form import PostEditor
from admin_console.auth.decorators import admin_required
from admin_console.extensions import db
from admin_console.models import BlogPost, Post

logger = logging.getLogger(__name__)


def _save_post(post):
    """on_submit for the editor: insert or update the stored post."""
    if post.is_new:
        row = Post.from_blog_post(post)
        db.session.add(row)
    else:
        row = db.session.get(Post, int(post.id))
        if row is None:
            abort(404)
        row.apply(post)
    db.session.commit()
    return row


def _back_to_list():
    return redirect(url_for('blog.list_posts'))


def _edit_post(initial_post):
    editor = PostEditor(initial_post, on_submit=_save_post, on_cancel=_back_to_list)
    
    if request.method == 'POST':
        if request.form.get('action') == 'cancel':
            return editor.cancel()
        
        try:
            editor.update(request.form)
            row = editor.submit()
        except ValueError as e:
            # PostValidationError or a bad field value
            flash(str(e), 'danger')
            return render_template('blog/form.html', editor=editor), 400
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.error("Could not save post: %s", e)
            flash('Could not save post.', 'danger')
            return render_template('blog/form.html', editor=editor), 500
        
        if initial_post.is_new:
            flash(f'Post "{row.title}" published.', 'success')
        else:
            flash(f'Post "{row.title}" updated.', 'success')
        return _back_to_list()
    
    return render_template('blog/form.html', editor=editor)


@blog_bp.route('/')
@admin_required
def list_posts():
    """All posts, newest first."""
    posts = Post.query.order_by(Post.date.desc(), Post.id.desc()).all()
    return render_template('blog/index.html', posts=[p.to_blog_post() for p in posts])


@blog_bp.route('/new', methods=['GET', 'POST'])
@admin_required
def new_post():
    return _edit_post(BlogPost.blank())


@blog_bp.route('/<int:post_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_post(post_id):
    row = db.get_or_404(Post, post_id)
    return _edit_post(row.to_blog_post())


@blog_bp.route('/<int:post_id>/delete', methods=['POST'])
@admin_required
def delete_post(post_id):
    """Delete a post."""
    row = db.get_or_404(Post, post_id)
    title = row.title
    
    try:
        db.session.delete(row)
        db.session.commit()
        flash(f'Post "{title}" deleted.', 'success')
    except SQLAlchemyError as e:
        db.session.rollback()
        flash(f'Could not delete post: {str(e)}', 'danger')
    
    return _back_to_list()
