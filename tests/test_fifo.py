from xf.ds.fifo import Fifo


def test_fifo_order():
    fifo = Fifo()
    fifo.enqueue("a")
    fifo.enqueue("b")
    assert fifo.dequeue() == "a"
    assert fifo.dequeue() == "b"
    assert fifo.dequeue() is None


def test_split_ends_share_queue():
    tx, rx = Fifo().split()
    tx.enqueue(10)
    tx.enqueue(20)
    assert rx.dequeue() == 10
    assert rx.dequeue() == 20
    assert rx.dequeue() is None


def test_ends_and_fifo_see_same_items():
    fifo = Fifo()
    fifo.tx.enqueue("x")
    assert fifo.dequeue() == "x"
    fifo.enqueue("y")
    assert fifo.rx.dequeue() == "y"