from .repositories import SkillCatalogRepository, MongoSkillCatalogRepository

__all__ = ["SkillCatalogRepository", "MongoSkillCatalogRepository"]
