from fastapi import APIRouter, HTTPException

from app.core.articles import ARTICLES
from app.schemas.article import ArticleRead, ArticleSummary

router = APIRouter(prefix="/articles", tags=["articles"])


@router.get("", response_model=list[ArticleSummary])
def list_articles():
    return [
        ArticleSummary(index=i, title=title, icon=icon)
        for i, (title, icon, _) in enumerate(ARTICLES)
    ]


@router.get("/{index}", response_model=ArticleRead)
def get_article(index: int):
    if not 0 <= index < len(ARTICLES):
        raise HTTPException(status_code=404, detail="Article not found")
    title, icon, content = ARTICLES[index]
    return ArticleRead(index=index, title=title, icon=icon, content=content)
