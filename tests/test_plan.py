from ixa.plan import Plan, PlanId, PlanSchedule, Queue


def _pop(queue):
    plan = queue.get_next_plan()
    assert isinstance(plan, Plan)
    return plan.time, plan.data


def test_empty_queue():
    assert Queue().get_next_plan() is None


def test_add_plans():
    q = Queue()
    q.add_plan(1.0, 1)
    q.add_plan(3.0, 3)
    q.add_plan(2.0, 2)
    assert not q.is_empty()
    assert _pop(q) == (1.0, 1)
    assert not q.is_empty()
    assert _pop(q) == (2.0, 2)
    assert not q.is_empty()
    assert _pop(q) == (3.0, 3)
    assert q.is_empty()
    assert q.get_next_plan() is None


def test_add_plans_at_same_time_with_same_priority():
    q = Queue()
    q.add_plan(1.0, 1)
    q.add_plan(1.0, 2)
    assert _pop(q) == (1.0, 1)
    assert _pop(q) == (1.0, 2)
    assert q.is_empty()
    assert q.get_next_plan() is None


def test_add_plans_at_same_time_with_different_priority():
    q = Queue()
    q.add_plan(1.0, 1, 1)
    q.add_plan(1.0, 2, 0)
    assert _pop(q) == (1.0, 2)
    assert _pop(q) == (1.0, 1)
    assert q.is_empty()
    assert q.get_next_plan() is None


def test_add_and_cancel_plans():
    q = Queue()
    q.add_plan(1.0, 1)
    to_cancel = q.add_plan(2.0, 2)
    q.add_plan(3.0, 3)
    assert q.cancel_plan(to_cancel) == 2
    assert _pop(q) == (1.0, 1)
    assert not q.is_empty()
    assert _pop(q) == (3.0, 3)
    assert q.is_empty()
    assert q.get_next_plan() is None


def test_add_and_get_plans():
    q = Queue()
    q.add_plan(1.0, 1)
    q.add_plan(2.0, 2)
    assert _pop(q) == (1.0, 1)
    q.add_plan(1.5, 3)
    assert _pop(q) == (1.5, 3)
    assert _pop(q) == (2.0, 2)
    assert q.is_empty()
    assert q.get_next_plan() is None


def test_cancel_invalid_plan():
    q = Queue()
    plan_id = q.add_plan(1.0, None)
    assert not q.is_empty()
    q.get_next_plan()
    assert q.is_empty()
    assert q.cancel_plan(plan_id) is None


def test_plan_ids_are_sequential():
    q = Queue()
    assert q.add_plan(1.0, "a") == PlanId(0)
    assert q.add_plan(1.0, "b") == PlanId(1)


def test_next_time_and_remaining_count():
    q = Queue()
    assert q.next_time() is None
    q.add_plan(5.0, "a")
    q.add_plan(2.0, "b")
    assert q.next_time() == 2.0
    assert q.remaining_plan_count() == 2


def test_cancelled_plan_still_counted_until_popped():
    q = Queue()
    first = q.add_plan(1.0, "a")
    q.cancel_plan(first)
    assert q.remaining_plan_count() == 1
    assert q.get_next_plan() is None
    assert q.remaining_plan_count() == 0


def test_peek_skips_cancelled():
    q = Queue()
    first = q.add_plan(1.0, "a")
    q.add_plan(2.0, "b")
    schedule, data = q.peek()
    assert (schedule.time, data) == (1.0, "a")
    q.cancel_plan(first)
    _, data = q.peek()
    assert data == "b"


def test_peek_empty():
    assert Queue().peek() is None


def test_list_schedules_limits_and_skips_cancelled():
    q = Queue()
    ids = [q.add_plan(float(t), t) for t in range(5)]
    q.cancel_plan(ids[0])
    everything = q.list_schedules(0)
    assert sorted(s.plan_id for s in everything) == [1, 2, 3, 4]
    assert len(q.list_schedules(2)) == 2


def test_clear_resets_counter():
    q = Queue()
    q.add_plan(1.0, "a")
    q.add_plan(2.0, "b")
    q.clear()
    assert q.is_empty()
    assert q.get_next_plan() is None
    assert q.add_plan(3.0, "c") == PlanId(0)


def test_schedule_ordering():
    early = PlanSchedule(plan_id=5, time=1.0, priority=0)
    later_priority = PlanSchedule(plan_id=0, time=1.0, priority=1)
    later_time = PlanSchedule(plan_id=0, time=2.0, priority=0)
    assert early < later_priority < later_time
    assert PlanSchedule(0, 1.0) < PlanSchedule(1, 1.0)