from typing import Any, Dict, List, Optional

from sqlalchemy import delete, insert, select, update

from .engine import ConnectionPool
from .models import users


class UserService:
    def __init__(self, pool: ConnectionPool):
        """Create a user service on top of an existing connection pool.

        Every method issues exactly one statement; values are always bound
        parameters.
        """
        self.pool = pool

    def list_users(self) -> List[Dict[str, Any]]:
        result = self.pool.execute(select(users).order_by(users.c.id.desc()))
        return result.rows

    def get_user(self, user_id: int) -> Optional[Dict[str, Any]]:
        result = self.pool.execute(select(users).where(users.c.id == user_id))
        return result.rows[0] if result.rows else None

    def create_user(self, name: Any, age: Any) -> Dict[str, Any]:
        result = self.pool.execute(insert(users).values(name=name, age=age))
        return {'id': result.inserted_id, 'name': name, 'age': age}

    def update_user(self, user_id: int, name: Any, age: Any) -> bool:
        """Overwrite name and age. Returns False when no row matched."""
        result = self.pool.execute(
            update(users).where(users.c.id == user_id).values(name=name, age=age)
        )
        return result.rowcount > 0

    def delete_user(self, user_id: int) -> bool:
        """Remove the row. Returns False when no row matched."""
        result = self.pool.execute(delete(users).where(users.c.id == user_id))
        return result.rowcount > 0
