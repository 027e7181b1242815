from loguru import logger

from src.application.dto.plan_input import PlanInput
from src.domain.entities.plan import Plan
from src.domain.errors import EmptyPlanError
from src.domain.ports.plan_repo_port import PlanRepoPort


class CreatePlan:
    def __init__(self, plan_repo: PlanRepoPort) -> None:
        self.plan_repo = plan_repo

    async def execute(self, name: str, description: str, tasks: list[str]) -> Plan:
        """Validate the input and create a new active plan.

        Raises:
            ValueError: the name is blank.
            EmptyPlanError: no non-blank task title was given.
        """
        plan_input = PlanInput(name=name, description=description, tasks=tasks)
        if not plan_input.tasks:
            raise EmptyPlanError()

        plan = await self.plan_repo.create_plan(
            plan_input.name, plan_input.description, plan_input.tasks
        )
        logger.debug("Plan {} written to {}", plan.id, plan.file_path)
        return plan
