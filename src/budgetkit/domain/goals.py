"""Savings goal domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from budgetkit.database.base import Database
from budgetkit.domain.entities import SavingsGoal
from budgetkit.domain.errors import NotFoundError, ValidationError, goal_not_found
from budgetkit.domain.scope import require_scope
from budgetkit.domain.validation import validate_amount, validate_name
from budgetkit.utils.logger import get_logger

logger = get_logger(__name__)


class SavingsGoalService:
    """Service for managing savings goals."""

    def __init__(self, db: Database):
        """Initialize savings goal service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_goal(
        self,
        scope_id: int,
        name: str,
        target_amount: Decimal,
        current_amount: Decimal = Decimal("0"),
        target_date: Optional[date] = None,
    ) -> int:
        """Create a savings goal.

        Returns:
            Goal ID

        Raises:
            NotFoundError: If the scope doesn't exist
            ValidationError: If target is not positive or current is negative
        """
        require_scope(self.db, scope_id)
        name = validate_name(name, "Goal name")
        target_amount = validate_amount(target_amount, "Target amount", allow_zero=False)
        current_amount = validate_amount(current_amount, "Current amount")

        goal_id = self.db.create_savings_goal(
            scope_id=scope_id,
            name=name,
            target_amount=target_amount,
            current_amount=current_amount,
            target_date=target_date,
        )
        logger.info("Created savings goal '%s' (ID: %d) in scope %d", name, goal_id, scope_id)
        return goal_id

    def get_goal(self, scope_id: int, goal_id: int) -> Optional[SavingsGoal]:
        """Get goal by ID, or None if it doesn't exist in the scope."""
        goal = self.db.get_savings_goal(goal_id)
        if goal is None or goal.scope_id != scope_id:
            return None
        return goal

    def require_goal(self, scope_id: int, goal_id: int) -> SavingsGoal:
        """Get goal by ID or raise NotFoundError."""
        goal = self.get_goal(scope_id, goal_id)
        if goal is None:
            raise NotFoundError(goal_not_found(goal_id))
        return goal

    def list_goals(self, scope_id: int, active_only: bool = False) -> list[SavingsGoal]:
        """List goals of a scope, newest first."""
        goals = self.db.list_savings_goals(scope_id)
        if active_only:
            goals = [goal for goal in goals if goal.is_active]
        return goals

    def update_goal(
        self,
        scope_id: int,
        goal_id: int,
        name: Optional[str] = None,
        target_amount: Optional[Decimal] = None,
        current_amount: Optional[Decimal] = None,
        target_date: Optional[date] = None,
        is_active: Optional[bool] = None,
        clear_target_date: bool = False,
    ) -> None:
        """Update the provided fields of a goal."""
        self.require_goal(scope_id, goal_id)

        if clear_target_date and target_date is not None:
            raise ValidationError("Cannot set and clear the target date at the same time")
        if name is not None:
            name = validate_name(name, "Goal name")
        if target_amount is not None:
            target_amount = validate_amount(target_amount, "Target amount", allow_zero=False)
        if current_amount is not None:
            current_amount = validate_amount(current_amount, "Current amount")

        self.db.update_savings_goal(
            goal_id,
            name=name,
            target_amount=target_amount,
            current_amount=current_amount,
            target_date=target_date,
            is_active=is_active,
            update_target_date=clear_target_date,
        )
        logger.info("Updated savings goal %d in scope %d", goal_id, scope_id)

    def contribute(self, scope_id: int, goal_id: int, amount: Decimal) -> SavingsGoal:
        """Add ``amount`` to a goal's saved amount.

        Returns:
            The updated goal
        """
        goal = self.require_goal(scope_id, goal_id)
        amount = validate_amount(amount, "Contribution", allow_zero=False)
        new_amount = validate_amount(goal.current_amount + amount, "Current amount")
        self.db.update_savings_goal(goal_id, current_amount=new_amount)
        logger.info("Added %s to savings goal %d", amount, goal_id)
        return self.require_goal(scope_id, goal_id)

    def delete_goal(self, scope_id: int, goal_id: int) -> None:
        """Delete a goal.

        Raises:
            NotFoundError: If the goal doesn't exist in the scope
        """
        self.require_goal(scope_id, goal_id)
        self.db.delete_savings_goal(goal_id)
        logger.info("Deleted savings goal %d from scope %d", goal_id, scope_id)
