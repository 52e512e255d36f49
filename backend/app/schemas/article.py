from pydantic import BaseModel


class ArticleSummary(BaseModel):
    index: int
    title: str
    icon: str


class ArticleRead(ArticleSummary):
    content: str
