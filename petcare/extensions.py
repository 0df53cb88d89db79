from flask_sqlalchemy import SQLAlchemy
from flask_wtf import CSRFProtect

db: SQLAlchemy = SQLAlchemy()
csrf: CSRFProtect = CSRFProtect()
