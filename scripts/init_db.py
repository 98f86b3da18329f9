"""Creates the upload folder, the MongoDB indexes and (optionally) seed categories.

    python scripts/init_db.py Widgets Gadgets
"""
import os
import sys

from catalog_admin.config import settings
from catalog_admin.database import db


os.makedirs(settings.UPLOAD_DIR, exist_ok=True)

db.ensure_indexes()
print(f'Indexes ready on {settings.MONGO_DB}')

for name in sys.argv[1:]:
    if db.categories.find_one({'name': name}):
        print(f'Category {name!r} already exists')
        continue
    db.categories.insert_one({'name': name, 'status': 'active'})
    print(f'Created category {name!r}')
