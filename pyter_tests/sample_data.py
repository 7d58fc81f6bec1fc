"""seeded sample data for the test modules."""
from typing import List
from faker import Faker

_fake = Faker()


def words(count: int, seed: int = 7) -> List[str]:
    """a reproducible list of lowercase words (duplicates possible)"""
    Faker.seed(seed)
    return [_fake.word() for _ in range(count)]


def numbers(count: int, low: int = 0, high: int = 100, seed: int = 7) -> List[int]:
    Faker.seed(seed)
    return [_fake.pyint(min_value=low, max_value=high) for _ in range(count)]


def people(count: int, seed: int = 7) -> List[dict]:
    """records with a name, a department and an age"""
    Faker.seed(seed)
    departments = ['eng', 'sales', 'hr', 'marketing']
    return [
        {
            'name': _fake.first_name(),
            'department': _fake.random_element(departments),
            'age': _fake.pyint(min_value=18, max_value=65),
        }
        for _ in range(count)
    ]
