import json

from users_api.database.engine import create_pool
from users_api.server import create_app
from users_api.settings import settings

if __name__ == '__main__':
    # Engines connect lazily, so no database is needed here
    pool = create_pool(settings)
    app = create_app(pool, settings)
    schema = app.openapi()
    with open('openapi.json', 'w') as f:
        json.dump(schema, f)
    pool.close()
