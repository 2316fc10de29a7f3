from src.tuition_center.tuition_center.database.bootstrap import iter_sql_statements


def test_splits_statements_and_skips_comments():
    sql = """
    CREATE TABLE a (id INT); -- trailing comment; with semicolon
    -- full line comment
    INSERT INTO a VALUES (1);
    """

    assert list(iter_sql_statements(sql)) == ["CREATE TABLE a (id INT)", "INSERT INTO a VALUES (1)"]


def test_keeps_semicolons_and_dashes_inside_quotes():
    sql = "INSERT INTO classes(schedule) VALUES('2; 4 -- 6');SELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO classes(schedule) VALUES('2; 4 -- 6')",
        "SELECT 1",
    ]
