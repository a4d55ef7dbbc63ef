from sqlalchemy.orm import declarative_base

# shared by every table so foreign keys resolve across modules
Base = declarative_base()
