"""Answer producers.

An answer producer turns the issued challenge into the payload that gets
submitted to the webhook. The workflow treats the payload as opaque text.
"""
from collections.abc import Callable

from configs import Answer_Config
from webhook_dataclasses import Answer_Payload, Challenge_Response

Answer_Producer = Callable[[Challenge_Response], Answer_Payload]

FINAL_QUERY = '''WITH high_earners AS (
    SELECT DISTINCT
        e.emp_id,
        e.first_name || ' ' || e.last_name AS emp_name,
        e.dob,
        e.department,
        p.payment_time::date AS payment_date
    FROM employee e
    JOIN payments p ON p.emp_id = e.emp_id
    WHERE p.amount > 70000
),
dept_ages AS (
    SELECT
        h.department,
        AVG(EXTRACT(YEAR FROM age(current_date, h.dob))) AS average_age
    FROM high_earners h
    GROUP BY h.department
),
dept_employees AS (
    SELECT
        h.department,
        h.emp_name,
        ROW_NUMBER() OVER (PARTITION BY h.department ORDER BY h.emp_name) AS rn
    FROM high_earners h
)
SELECT
    d.department_name,
    da.average_age AS average_age,
    STRING_AGG(de.emp_name, ', ' ORDER BY de.emp_name) AS employee_list
FROM dept_ages da
JOIN dept_employees de
    ON de.department = da.department
   AND de.rn <= 10
JOIN department d
    ON d.department_id = da.department
GROUP BY d.department_id, d.department_name, da.average_age
ORDER BY d.department_id DESC;'''


def static_answer(text: str) -> Answer_Producer:
    payload = Answer_Payload(text)

    def produce(_: Challenge_Response) -> Answer_Payload:
        return payload

    return produce


def file_answer(path: str) -> Answer_Producer:
    """Reads *path* once, so a missing file fails before any request is sent."""
    with open(path, encoding='utf-8') as query_file:
        return static_answer(query_file.read().rstrip('\n'))


def answer_from_config(answer_config: Answer_Config) -> Answer_Producer:
    if answer_config.query_file:
        return file_answer(answer_config.query_file)

    if answer_config.query:
        return static_answer(answer_config.query)

    return static_answer(FINAL_QUERY)
