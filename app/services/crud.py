"""Create/read/update/delete services for expenses and todos.

Every operation loads the full collection, applies the change and saves the full collection back.
"""

from app.core.errors import InvalidRequest, NotFound
from app.core.models import Expense, ExpenseCreate, ExpenseUpdate, Todo, TodoCreate, TodoUpdate
from app.core.utils import get_logger, new_record_id, parse_amount, utcnow_iso

from .record_store import RecordStore

logger = get_logger("expense-tracker.crud")


def _index_of(records: list, record_id: str) -> int:
    for idx, record in enumerate(records):
        if record.id == record_id:
            return idx
    return -1


class ExpenseService:
    """Expense collection operations."""

    def __init__(self, store: RecordStore[Expense]) -> None:
        """Initialize ExpenseService with the expenses record store."""
        self.store = store

    def list_all(self) -> list[Expense]:
        """Return every expense in stored order."""
        return self.store.load()

    def get(self, expense_id: str) -> Expense:
        """Return one expense by id."""
        for exp in self.store.load():
            if exp.id == expense_id:
                return exp
        raise NotFound("Expense not found")

    def create(self, payload: ExpenseCreate) -> Expense:
        """Validate and append a new expense."""
        if not payload.date or not payload.category:
            raise InvalidRequest("Date, amount, and category are required.")
        try:
            amount = parse_amount(payload.amount)
        except InvalidRequest as exc:
            raise InvalidRequest("Date, amount, and category are required.") from exc
        expense = Expense(
            id=new_record_id(),
            date=payload.date,
            amount=amount,
            category=payload.category,
            description=payload.description or "",
            notes=payload.notes or "",
        )
        expenses = self.store.load()
        expenses.append(expense)
        self.store.save(expenses)
        logger.info(f"Created expense {expense.id}: {expense.category} {expense.amount} on {expense.date}")
        return expense

    def update(self, expense_id: str, payload: ExpenseUpdate) -> Expense:
        """Merge the provided fields into an existing expense."""
        expenses = self.store.load()
        idx = _index_of(expenses, expense_id)
        if idx == -1:
            raise NotFound("Expense not found")
        current = expenses[idx]
        provided = payload.model_fields_set
        updated = current.model_copy(
            update={
                "date": payload.date or current.date,
                "amount": parse_amount(payload.amount) if "amount" in provided else current.amount,
                "category": payload.category or current.category,
                "description": payload.description or current.description,
                "notes": (payload.notes or "") if "notes" in provided else current.notes,
            }
        )
        expenses[idx] = updated
        self.store.save(expenses)
        logger.info(f"Updated expense {expense_id}")
        return updated

    def delete(self, expense_id: str) -> None:
        """Remove an expense by id."""
        expenses = self.store.load()
        remaining = [exp for exp in expenses if exp.id != expense_id]
        if len(remaining) == len(expenses):
            raise NotFound("Expense not found")
        self.store.save(remaining)
        logger.info(f"Deleted expense {expense_id}")


class TodoService:
    """Todo collection operations."""

    def __init__(self, store: RecordStore[Todo]) -> None:
        """Initialize TodoService with the todos record store."""
        self.store = store

    def list_all(self) -> list[Todo]:
        """Return every todo in stored order."""
        return self.store.load()

    def get(self, todo_id: str) -> Todo:
        """Return one todo by id."""
        for todo in self.store.load():
            if todo.id == todo_id:
                return todo
        raise NotFound("Todo not found")

    def create(self, payload: TodoCreate) -> Todo:
        """Validate and append a new todo."""
        if not payload.text:
            raise InvalidRequest("Todo text is required.")
        todo = Todo(
            id=new_record_id(),
            text=payload.text,
            completed=payload.completed or False,
            created_at=utcnow_iso(),
        )
        todos = self.store.load()
        todos.append(todo)
        self.store.save(todos)
        logger.info(f"Created todo {todo.id}")
        return todo

    def update(self, todo_id: str, payload: TodoUpdate) -> Todo:
        """Replace text and completed when they are present in the payload."""
        todos = self.store.load()
        idx = _index_of(todos, todo_id)
        if idx == -1:
            raise NotFound("Todo not found")
        changes = payload.model_dump(include=payload.model_fields_set & {"text", "completed"})
        if any(value is None for value in changes.values()):
            raise InvalidRequest("Todo text and completed cannot be null.")
        updated = todos[idx].model_copy(update=changes)
        todos[idx] = updated
        self.store.save(todos)
        logger.info(f"Updated todo {todo_id}")
        return updated

    def delete(self, todo_id: str) -> None:
        """Remove a todo by id."""
        todos = self.store.load()
        remaining = [todo for todo in todos if todo.id != todo_id]
        if len(remaining) == len(todos):
            raise NotFound("Todo not found")
        self.store.save(remaining)
        logger.info(f"Deleted todo {todo_id}")
