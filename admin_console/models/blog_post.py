"""
Blog Post Record

The value the post editor works on. Records are never mutated; every edit
produces a new one.
"""

from dataclasses import dataclass, asdict
from datetime import date

CATEGORIES = ('Design', 'Development', 'Marketing', 'Business', 'Technology')


@dataclass(frozen=True)
class BlogPost:
    """A blog post as seen by the admin console.

    An empty ``id`` marks a post that has not been created yet.
    """
    id: str = ''
    title: str = ''
    category: str = ''
    excerpt: str = ''
    content: str = ''
    author: str = ''
    date: str = ''
    image: str = ''
    
    @classmethod
    def blank(cls, today=None):
        """New, unsaved post dated today."""
        today = today or date.today()
        return cls(date=today.isoformat())
    
    @property
    def is_new(self):
        return not self.id
    
    def to_dict(self):
        return asdict(self)
