"""
Blog Post Model
"""

from admin_console.extensions import db
from admin_console.models.blog_post import BlogPost


class Post(db.Model):
    """Stored blog post; the editor works on BlogPost values, not on rows."""
    __tablename__ = 'posts'
    
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    category = db.Column(db.String(50), default='')
    excerpt = db.Column(db.String(500), nullable=False)
    content = db.Column(db.Text, nullable=False)
    author = db.Column(db.String(100), nullable=False)
    date = db.Column(db.String(10), nullable=False)  # ISO date, YYYY-MM-DD
    image = db.Column(db.String(500), nullable=False)
    
    @classmethod
    def from_blog_post(cls, post):
        row = cls()
        row.apply(post)
        return row
    
    def apply(self, post):
        """Copy every editable field of a BlogPost onto this row."""
        self.title = post.title
        self.category = post.category
        self.excerpt = post.excerpt
        self.content = post.content
        self.author = post.author
        self.date = post.date
        self.image = post.image
    
    def to_blog_post(self):
        return BlogPost(
            id=str(self.id) if self.id is not None else '',
            title=self.title or '',
            category=self.category or '',
            excerpt=self.excerpt or '',
            content=self.content or '',
            author=self.author or '',
            date=self.date or '',
            image=self.image or '',
        )
    
    def __repr__(self):
        return f'<Post {self.id} {self.title!r}>'
