import pytest

from controllers.dependency_graph import INDENT, DependencyGraph
from controllers.errors import DependencyError
from fakes import FakeCheckBox, FakeText


def test_slave_follows_master():
    graph = DependencyGraph()
    master, slave = FakeCheckBox(selection=True), FakeText()
    graph.add_dependency(master, slave)

    master.click()
    assert slave.enabled is False
    master.click()
    assert slave.enabled is True


def test_evaluate_all_applies_existing_state():
    graph = DependencyGraph()
    master, slave = FakeCheckBox(selection=False), FakeText()
    graph.add_dependency(master, slave)
    assert slave.enabled is True  # nothing fired yet

    graph.evaluate_all()
    assert slave.enabled is False

    master.set_selection(True)  # silent, like a load
    graph.evaluate_all()
    assert slave.enabled is True


def test_slave_is_indented_once():
    graph = DependencyGraph()
    slave = FakeText()
    graph.add_dependency(FakeCheckBox(), slave)
    assert slave.indent == INDENT


def test_three_link_chain():
    graph = DependencyGraph()
    m, a, b = FakeCheckBox(True), FakeCheckBox(True), FakeText()
    graph.add_dependency(m, a)
    graph.add_dependency(a, b)
    graph.evaluate_all()
    assert a.enabled and b.enabled

    m.click()
    assert a.enabled is False
    assert b.enabled is False

    m.click()
    assert a.enabled is True
    assert b.enabled is True

    a.click()
    assert b.enabled is False


def test_chain_registered_out_of_order_still_settles():
    graph = DependencyGraph()
    m, a, b = FakeCheckBox(False), FakeCheckBox(True), FakeText()
    graph.add_dependency(a, b)
    graph.add_dependency(m, a)

    graph.evaluate_all()
    assert a.enabled is False
    assert b.enabled is False


def test_one_master_drives_many_slaves():
    graph = DependencyGraph()
    m = FakeCheckBox(True)
    slaves = [FakeText(), FakeCheckBox(), FakeText()]
    for s in slaves:
        graph.add_dependency(m, s)
    assert len(m.listeners) == 1

    m.click()
    assert [s.enabled for s in slaves] == [False, False, False]
    assert graph.slaves_of(m) == slaves
    assert graph.master_of(slaves[1]) is m


def test_contract_errors():
    graph = DependencyGraph()
    with pytest.raises(ValueError):
        graph.add_dependency(FakeCheckBox(), None)
    slave = FakeText()
    graph.add_dependency(FakeCheckBox(), slave)
    with pytest.raises(DependencyError):
        graph.add_dependency(FakeCheckBox(), slave)


def test_detach_all():
    graph = DependencyGraph()
    m, s = FakeCheckBox(True), FakeText()
    graph.add_dependency(m, s)
    graph.detach_all()
    m.click()
    assert s.enabled is True
    assert m.listeners == []
