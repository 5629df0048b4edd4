from xf.num.limit import Limit


def test_add_and_sub_assign():
    lim = Limit.new_min(0, 10)
    assert lim.value == 0

    lim += 7
    assert lim.value == 7

    lim += 7
    assert lim.value == 10

    lim -= 7
    assert lim.value == 3

    lim -= 7
    assert lim.value == 0


def test_compare_to_value_type():
    assert Limit(0, 10, 5) == 5
    assert Limit(0.0, 10.0, 5.0) == 5.0
    assert not (Limit(0, 10, 5) == 6)


def test_new_max_and_flags():
    lim = Limit.new_max(0, 10)
    assert lim.value == 10
    assert lim.is_at_max()
    assert not lim.is_at_min()


def test_set_min_and_set_max():
    lim = Limit(0, 10, 5)
    lim.set_min()
    assert lim.is_at_min()
    assert lim.value == 0
    lim.set_max()
    assert lim.is_at_max()
    assert lim.value == 10


def test_set_clamps():
    lim = Limit(0, 10, 5)
    lim.set(15)
    assert lim.value == 10
    lim.set(-3)
    assert lim.value == 0
    lim.set(4)
    assert lim.value == 4


def test_str_shows_value():
    assert str(Limit(0, 10, 5)) == "5"