"""Example pytest test using the rushb_suite fixture.

Run with: pytest examples/rushb_example_pytest.py
"""


def test_inventory(rushb_suite):
    s = rushb_suite
    stock = {"apples": 3, "pears": 0}

    def lookups():
        s.check("apples in stock", lambda s: stock["apples"] > 0)
        # Recorded as a failure; the remaining checks still run.
        s.check("pears in stock", lambda s: stock["pears"] > 0 or "no pears left")
        s.check("unknown fruit", lambda s: s.assert_equal(stock.get("kiwi"), None))

    def body():
        s.critical("inventory loaded", lambda s: bool(stock))
        s.title("Lookups", lookups)
        s.skip("restocking", lambda s: None)

    s.start("Inventory", body)
