from unitstat.systemd import (
    MalformedLineError,
    UnitFileIndex,
    UnitReconciler,
    UnitRecord,
    UnitStatus,
    UnknownStateError,
)


def make_reconciler(**states: str) -> UnitReconciler:
    return UnitReconciler(UnitFileIndex(states=states))


def test_status_enriched_with_enablement_state():
    reconciler = UnitReconciler(
        UnitFileIndex(states={'foo.service': 'enabled'})
    )

    record = reconciler.reconcile_line('foo.service loaded active running')

    assert isinstance(record, UnitRecord)
    assert record.tags() == {
        'name': 'foo.service',
        'state': 'enabled',
        'load': 'loaded',
        'sub': 'running',
    }
    assert record.fields() == {
        'load_code': 0,
        'active_code': 0,
        'sub_code': 0,
        'state_code': 1,
    }


def test_missing_unit_file_resolves_to_null():
    record = make_reconciler().reconcile_line(
        'user@1000.service loaded active running User Manager'
    )

    assert isinstance(record, UnitRecord)
    assert record.enablement_state == 'null'
    assert record.state_code == 10
    assert record.tags()['state'] == 'null'


def test_unknown_enablement_state_skips_unit():
    reconciler = UnitReconciler(
        UnitFileIndex(states={'foo.service': 'alias'})
    )

    outcome = reconciler.reconcile_line('foo.service loaded active running')

    assert isinstance(outcome, UnknownStateError)
    assert outcome.field == 'state'
    assert outcome.value == 'alias'
    assert outcome.name == 'foo.service'
    assert 'foo.service' in str(outcome)


def test_malformed_status_line_passes_through():
    outcome = make_reconciler().reconcile_line('foo.service loaded')
    assert isinstance(outcome, MalformedLineError)


def test_reconcile_status_model():
    reconciler = UnitReconciler(
        UnitFileIndex(states={'tmp.mount': 'generated'})
    )

    record = reconciler.reconcile(
        UnitStatus(name='tmp.mount', load='loaded', active='active',
                   sub='mounted')
    )

    assert record.load_code == 0
    assert record.sub_code == 0x32
    assert record.state_code == 3


def test_reconcile_unknown_status_value():
    outcome = make_reconciler().reconcile(
        UnitStatus(name='foo.service', load='loaded', active='zombie',
                   sub='running')
    )
    assert isinstance(outcome, UnknownStateError)
    assert outcome.field == 'active'


def test_one_outcome_per_line():
    reconciler = UnitReconciler(
        UnitFileIndex(states={
            'a.service': 'enabled',
            'b.service': 'disabled',
            'only-file.service': 'static',
        })
    )

    outcomes = list(reconciler.reconcile_lines([
        'a.service loaded active running',
        'b.service loaded inactive dead',
    ]))

    assert [o.name for o in outcomes] == ['a.service', 'b.service']
    assert [o.state_code for o in outcomes] == [1, 0]
