from schedule_engine.layout import group_by_rows
from schedule_engine.location import is_location_marker, nearest_location
from schedule_engine.models import Fragment


def test_is_location_marker():
    assert is_location_marker(Fragment("ITIS 12", 0, 0))
    assert is_location_marker(Fragment("Lab. Fisica", 0, 0))
    assert not is_location_marker(Fragment("Aula 5", 0, 0))


def test_nearest_location_prefers_own_room():
    subject = Fragment("Fisica", 100, 502)
    rows = group_by_rows([
        subject,
        Fragment("Lab.1", 100, 490),
        Fragment("Lab.2", 200, 490),
        Fragment("ITIS 4", 100, 430),
    ])

    assert nearest_location(subject, rows, 0) == "Lab.1"


def test_nearest_location_box_excludes_closer_marker():
    subject = Fragment("Storia", 100, 500)
    outside_dy = Fragment("ITIS 1", 100, 370)   # 130 below, outside the box
    inside = Fragment("ITIS 2", 290, 500)       # 190 to the right
    rows = group_by_rows([subject, inside, outside_dy])

    assert nearest_location(subject, rows, 0) == "ITIS 2"


def test_nearest_location_box_bounds_are_inclusive():
    subject = Fragment("Storia", 100, 500)
    rows = group_by_rows([subject, Fragment("ITIS 9", 300, 380)])

    assert nearest_location(subject, rows, 0) == "ITIS 9"


def test_nearest_location_falls_back_to_page_wide_search():
    subject = Fragment("Inglese", 100, 500)
    rows = [
        [subject],
        [Fragment("x", 0, 450)],
        [Fragment("x", 0, 400)],
        [Fragment("x", 0, 350)],
        [Fragment("IPSIA far", 700, 100)],
        [Fragment("IPSIA near", 100, 50)],
    ]

    assert nearest_location(subject, rows, 0) == "IPSIA near"


def test_nearest_location_fallback_when_window_marker_outside_box():
    subject = Fragment("Chimica", 100, 500)
    rows = group_by_rows([subject, Fragment("Lab.3", 350, 500)])

    assert nearest_location(subject, rows, 0) == "Lab.3"


def test_nearest_location_window_is_clamped():
    subject = Fragment("Chimica", 100, 500)
    rows = [[Fragment("Lab.0", 100, 560)], [subject]]

    assert nearest_location(subject, rows, 1) == "Lab.0"


def test_nearest_location_without_markers():
    subject = Fragment("Religione", 100, 500)
    rows = group_by_rows([subject, Fragment("Rossi M.", 100, 480)])

    assert nearest_location(subject, rows, 0) is None
