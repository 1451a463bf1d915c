# app/routers/deps.py
"""
Shared service instances for the routers.

Services are stateless apart from their repositories, so one instance
per process is enough (identity is the exception, see core.auth).
"""

from app.core.description_writer import DescriptionWriter
from app.repositories.follow_repo import FollowRepository
from app.repositories.plan_repo import PlanRepository
from app.repositories.subscription_repo import SubscriptionRepository
from app.services.access_service import AccessService
from app.services.catalog_service import CatalogService
from app.services.relationship_service import RelationshipService

plan_repo = PlanRepository()
sub_repo = SubscriptionRepository()
follow_repo = FollowRepository()

catalog_service = CatalogService(plan_repo, writer=DescriptionWriter())
access_service = AccessService(catalog_service, sub_repo)
relationship_service = RelationshipService(follow_repo, sub_repo, plan_repo)
