import json
from datetime import datetime, timezone

import pytest

from core_domain.export import build_export, parse_export
from functional_age.export import export_results
from functional_age.scoring import calculate_results
from brain_age.export import export_brain_age_results
from brain_age.scoring import calculate_brain_age_results


EXPORTED_AT = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_functional_export(all_skipped):
    result = calculate_results(all_skipped)
    document = parse_export(export_results(all_skipped, result, exported_at=EXPORTED_AT))

    assessment = document['assessment']
    assert assessment['date'] == '2026-01-02T03:04:05.000Z'
    assert assessment['profile']['chronologicalAge'] == 45
    assert assessment['results']['sitToStand'] == {'kind': 'skipped', 'reason': 'pain', 'details': None}
    assert assessment['results']['recoveryContext'] == {'morningStiffness': '<5m', 'postWorkoutSoreness': '1-2d'}

    assert document['scores'] == {
        'functionalAge': result.functional_age,
        'chronologicalAge': 45,
        'gap': result.gap,
        'topDrivers': [
            {'tag': d.tag, 'impact': d.impact, 'suggestion': d.suggestion}
            for d in result.top_drivers
        ],
    }


def test_brain_export(brain_all_skipped):
    result = calculate_brain_age_results(brain_all_skipped)
    document = parse_export(export_brain_age_results(brain_all_skipped, result, exported_at=EXPORTED_AT))

    assert document['assessment']['profile']['sleepHours'] == 7.5
    assert set(document['assessment']['results']) == {
        'lightningTap', 'colorClash', 'memoryMatrix', 'focusFilter', 'trailSwitch',
    }
    assert document['scores'] == {
        'brainAge': 33,
        'chronologicalAge': 30,
        'gap': 3,
        'topDrivers': [d.model_dump(mode='json', by_alias=True) for d in result.top_drivers],
    }
    assert document['scores']['topDrivers'][0]['impact'] == 'negative'


def test_export_is_indented():
    text = build_export(None, {}, {'gap': 0}, exported_at=EXPORTED_AT)
    assert text.startswith('{\n  "assessment"')
    assert json.loads(text)['assessment']['profile'] is None


@pytest.mark.parametrize("text", ['[]', '{"assessment": {}}', '{"scores": {}}'])
def test_parse_export_rejects_other_documents(text):
    with pytest.raises(ValueError):
        parse_export(text)
