from askyou.content.site import NAV_LINKS, PRICING_PLANS, nav_link, plan_comparison


def test_nav_pages_exist():
    from pathlib import Path

    root = Path(__file__).resolve().parents[1]
    assert [l.label for l in NAV_LINKS] == ["About", "Features", "Pricing", "Demo", "Contact"]
    for link in NAV_LINKS:
        assert (root / link.page).is_file(), link.page


def test_plans():
    assert [p.name for p in PRICING_PLANS] == ["Free", "Starter", "Pro", "Enterprise"]
    assert [p.price_label for p in PRICING_PLANS] == ["$0", "$49", "$199", "Custom"]
    assert [p.name for p in PRICING_PLANS if p.popular] == ["Starter"]
    for p in PRICING_PLANS:
        nav_link(p.target)


def test_plan_comparison():
    df = plan_comparison()
    assert list(df.columns) == ["Free", "Starter", "Pro", "Enterprise"]
    assert df.loc["Real-time tracking", "Free"] == "❌"
    assert df.loc["Real-time tracking", "Starter"] == "✅"
    assert df.loc["SLA guarantee", "Free"] == "—"
