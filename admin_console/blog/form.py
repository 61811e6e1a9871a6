"""
Post Editor Form

Form state for creating or editing one blog post. The editor keeps a
scratch copy of the post, replaces it wholesale on every field change and
hands it to the caller's on_submit. Saving is the caller's business.
"""

from dataclasses import replace

from admin_console.models.blog_post import CATEGORIES

EDITABLE_FIELDS = ('title', 'category', 'excerpt', 'content', 'author', 'date', 'image')
REQUIRED_FIELDS = ('title', 'author', 'date', 'excerpt', 'content', 'image')


class PostValidationError(ValueError):
    """Raised on submit when required fields are empty."""

    def __init__(self, fields):
        self.fields = tuple(fields)
        super().__init__('Please fill in: ' + ', '.join(self.fields))


class PostEditor:
    """Controlled form over a BlogPost.

    Args:
        initial_post: the post being edited (a blank one for a new post)
        on_submit: called with the finished BlogPost
        on_cancel: called with no arguments when the user cancels
    """

    def __init__(self, initial_post, on_submit, on_cancel):
        self.initial_post = initial_post
        self.post = initial_post
        self.on_submit = on_submit
        self.on_cancel = on_cancel

    @property
    def submit_label(self):
        return 'Update Post' if self.post.id else 'Publish Post'

    @property
    def categories(self):
        return CATEGORIES

    def set_field(self, name, value):
        """Write one field, producing a new scratch record."""
        if name not in EDITABLE_FIELDS:
            raise ValueError(f'Unknown post field: {name}')
        if name == 'category' and value and value not in CATEGORIES:
            raise ValueError(f'Unknown category: {value}')
        self.post = replace(self.post, **{name: value})
        return self.post

    def update(self, form):
        """Apply every editable field present in a form mapping."""
        for name in EDITABLE_FIELDS:
            if name in form:
                self.set_field(name, form[name])
        return self.post

    def reset(self, initial_post):
        """Switch to a different post, dropping unsaved edits.

        Returns True if the scratch copy was replaced.
        """
        if initial_post is self.initial_post:
            return False
        self.initial_post = initial_post
        self.post = initial_post
        return True

    def missing_fields(self):
        return [name for name in REQUIRED_FIELDS if not getattr(self.post, name)]

    def submit(self):
        missing = self.missing_fields()
        if missing:
            raise PostValidationError(missing)
        return self.on_submit(self.post)

    def cancel(self):
        return self.on_cancel()
