from .appcheck import ApplicationRecord
