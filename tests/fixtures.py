"""
Test Fixtures

Common test classes used across test modules
"""


class Database:
    """Test database class"""

    def __init__(self):
        self.name = "TestDB"


class CacheService:
    """Test cache service"""

    def __init__(self):
        self.cache = {}


class UserRepository:
    """Test repository with dependencies"""

    def __init__(self, db: Database, cache: CacheService):
        self.db = db
        self.cache = cache


class ServiceA:
    """First half of a mutual dependency, holds ServiceB directly"""

    def __init__(self, b: 'ServiceB'):
        self.b = b


class ServiceB:
    """Second half of a mutual dependency, holds a lazy handle to ServiceA"""

    def __init__(self, a_handle):
        self.a_handle = a_handle

    async def peer(self) -> ServiceA:
        return await self.a_handle.get()


class Level1:
    """First level of nested dependencies"""
    pass


class Level2:
    """Second level of nested dependencies"""

    def __init__(self, l1: Level1):
        self.l1 = l1


class Level3:
    """Third level of nested dependencies"""

    def __init__(self, l2: Level2):
        self.l2 = l2
