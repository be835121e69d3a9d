"""
Service for financial goal progress updates.
"""

import logging

from ..utils.aggregation import HUNDRED

logger = logging.getLogger(__name__)


class GoalService:
    """Goal operations beyond plain CRUD."""

    @staticmethod
    def update_progress(owner_context, goal, current_amount):
        """
        Set the amount saved so far for a goal.

        Args:
            owner_context: OwnerContext of the request
            goal: Owned FinancialGoal instance
            current_amount: New non-negative amount

        Returns:
            FinancialGoal: The updated goal
        """
        previous_amount = goal.current_amount
        goal.current_amount = current_amount
        goal.save(update_fields=["current_amount", "updated_at"])

        logger.info(
            "Goal progress updated",
            extra={
                "owner_id": owner_context.owner_id,
                "goal_id": str(goal.id),
                "previous_amount": str(previous_amount),
                "current_amount": str(current_amount),
                "goal_reached": goal.progress >= HUNDRED,
                "action": "goal_progress_updated",
                "component": "GoalService",
            },
        )
        return goal
