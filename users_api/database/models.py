from sqlalchemy import Column, Integer, MetaData, String, Table

metadata = MetaData()

users = Table(
    'users',
    metadata,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('name', String(255), nullable=False),
    Column('age', Integer, nullable=False),
)
