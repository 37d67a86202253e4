import threading

from student_service.repositories import StudentRepository


def test_create_then_get_returns_same_fields():
    repo = StudentRepository()
    created = repo.create("Alice", 23, "alice@gmail.com")
    assert created.id == 1
    fetched = repo.get(created.id)
    assert fetched == created
    assert (fetched.name, fetched.age, fetched.email) == ("Alice", 23, "alice@gmail.com")


def test_seed_records_get_sequential_ids():
    repo = StudentRepository([
        {"name": "Rahul", "age": 22, "email": "rahul@gmail.com"},
        {"name": "Alice", "age": 23, "email": "alice@gmail.com"},
    ])
    assert [s.id for s in repo.list()] == [1, 2]


def test_ids_are_not_reused_after_delete():
    # create 2, delete id 1, create again: a length-based id would collide with 2
    repo = StudentRepository()
    repo.create("A", 20, "a@example.com")
    repo.create("B", 21, "b@example.com")
    assert repo.delete(1) is True
    third = repo.create("C", 22, "c@example.com")
    assert third.id == 3
    ids = [s.id for s in repo.list()]
    assert ids == [2, 3]
    assert len(set(ids)) == len(ids)


def test_update_preserves_id_and_overwrites_fields():
    repo = StudentRepository()
    s = repo.create("Rob", 24, "rob@gmail.com")
    assert repo.update(s.id, "Robert", 25, "robert@example.com") is True
    got = repo.get(s.id)
    assert got.id == s.id
    assert (got.name, got.age, got.email) == ("Robert", 25, "robert@example.com")


def test_update_unknown_id_leaves_store_unchanged():
    repo = StudentRepository()
    repo.create("Rob", 24, "rob@gmail.com")
    before = repo.list()
    assert repo.update(99, "X", 1, "x@example.com") is False
    assert repo.list() == before


def test_delete_keeps_order_and_second_delete_fails():
    repo = StudentRepository()
    for name in ("A", "B", "C", "D"):
        repo.create(name, 20, f"{name.lower()}@example.com")
    assert repo.delete(2) is True
    assert [s.name for s in repo.list()] == ["A", "C", "D"]
    assert repo.delete(2) is False
    assert len(repo.list()) == 3


def test_returned_records_are_copies():
    repo = StudentRepository()
    s = repo.create("A", 20, "a@example.com")
    s.name = "mutated"
    repo.list()[0].age = 99
    got = repo.get(s.id)
    assert got.name == "A"
    assert got.age == 20


def test_concurrent_creates_get_unique_ids():
    repo = StudentRepository()

    def _work():
        for _ in range(50):
            repo.create("T", 20, "t@example.com")

    threads = [threading.Thread(target=_work) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    ids = [s.id for s in repo.list()]
    assert len(ids) == 400
    assert len(set(ids)) == 400


def test_demo_seed_matches_initial_roster():
    from student_service.models import DEMO_STUDENTS

    repo = StudentRepository(DEMO_STUDENTS)
    assert [(s.id, s.name) for s in repo.list()] == [(1, "Rahul"), (2, "Alice"), (3, "Rob")]
