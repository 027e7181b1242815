from src.application.services.plan_board import PlanBoard

__all__ = ["PlanBoard"]
