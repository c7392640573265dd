"""Resource operation wrappers over the request pipeline."""

from .comments import CommentsOperations
from .media import MediaOperations
from .pages import PagesOperations
from .posts import PostsOperations
from .site import SiteOperations
from .taxonomies import TaxonomiesOperations
from .users import UsersOperations

__all__ = [
    "PostsOperations",
    "PagesOperations",
    "MediaOperations",
    "UsersOperations",
    "CommentsOperations",
    "TaxonomiesOperations",
    "SiteOperations",
]
