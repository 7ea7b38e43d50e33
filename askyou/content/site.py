from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import pandas as pd


@dataclass(frozen=True)
class NavLink:
    label: str
    page: str
    icon: str = ""


NAV_LINKS: Tuple[NavLink, ...] = (
    NavLink("About", "pages/1_About.py", "ℹ️"),
    NavLink("Features", "pages/2_Features.py", "✨"),
    NavLink("Pricing", "pages/3_Pricing.py", "💳"),
    NavLink("Demo", "pages/4_Demo.py", "🧮"),
    NavLink("Contact", "pages/5_Contact.py", "✉️"),
)


def nav_link(label: str) -> NavLink:
    for link in NAV_LINKS:
        if link.label == label:
            return link
    raise KeyError(label)


# -------------------------
# About
# -------------------------
ABOUT_HERO = (
    "Revolutionizing ESG Reporting",
    "AskYou is an innovative AI-powered platform that transforms how businesses track and report "
    "their carbon emissions. We make ESG compliance accessible, accurate, and efficient for "
    "organizations of all sizes.",
)

ABOUT_BENEFITS: Tuple[Tuple[str, str], ...] = (
    (
        "Simplified Data Collection",
        "Our AI-powered surveys dynamically adapt to your business context, making it easy to collect "
        "accurate carbon emission data across all activities. From flights to energy consumption, "
        "we've got you covered.",
    ),
    (
        "Industry Standard Compliance",
        "Built on frameworks like HKEX and GHG Protocol, AskYou ensures your ESG reporting meets global "
        "standards including GRI and TCFD requirements. Stay compliant without the complexity.",
    ),
    (
        "Automated Calculations",
        "Say goodbye to manual calculations. Our platform instantly processes your data to generate "
        "accurate carbon emission metrics for all business activities, saving you time and reducing errors.",
    ),
    (
        "Accessible for All",
        "Whether you're an SME or NGO, AskYou makes sustainability tracking affordable and manageable. "
        "Access the tools you need to enhance compliance and secure sustainability-linked funding.",
    ),
)


# -------------------------
# Features
# -------------------------
FEATURES_HERO = (
    "AI-Powered Carbon Tracking Made Simple",
    "Automate your ESG reporting with precision and ease. Experience the future of sustainability "
    "tracking with our intelligent platform.",
)

FEATURES: Tuple[Tuple[str, str, str], ...] = (
    (
        "🚀",
        "AI-Generated Surveys for Data Collection",
        "Our intelligent system dynamically adjusts questions based on your responses, making data "
        "collection effortless and precise. Experience streamlined ESG data gathering that adapts to "
        "your business context.",
    ),
    (
        "📊",
        "Automated Carbon Emission Calculation",
        "Instantly compute emissions using standardized frameworks like HKEX and GHG Protocol. Our AI "
        "processes complex data points to deliver accurate carbon footprint measurements in real-time.",
    ),
    (
        "📄",
        "Instant ESG Report Generation",
        "Transform raw data into compliance-ready ESG reports within seconds. Our platform automatically "
        "generates comprehensive reports that meet global reporting standards.",
    ),
    (
        "⏱️",
        "Cost & Time Efficiency",
        "Reduce ESG reporting time from 2 weeks to just 7 seconds. Save valuable resources while "
        "maintaining the highest standards of accuracy and compliance.",
    ),
    (
        "🥧",
        "User-Friendly Dashboard",
        "Track your sustainability progress through our intuitive interface. Get clear visualizations "
        "and actionable insights that help drive your ESG initiatives forward.",
    ),
)

FEATURE_PREVIEWS: Tuple[str, ...] = ("Interactive Dashboard", "AI-Powered Form Generation")


# -------------------------
# Pricing
# -------------------------
@dataclass(frozen=True)
class PlanFeature:
    text: str
    included: bool


@dataclass(frozen=True)
class PricingPlan:
    name: str
    description: str
    price: str
    period: str
    features: Tuple[PlanFeature, ...]
    cta: str
    target: str
    popular: bool = False

    @property
    def price_label(self) -> str:
        return self.price if self.price == "Custom" else f"${self.price}"


def _f(text: str, included: bool = True) -> PlanFeature:
    return PlanFeature(text, included)


PRICING_PLANS: Tuple[PricingPlan, ...] = (
    PricingPlan(
        name="Free",
        description="Perfect for small businesses exploring ESG reporting",
        price="0",
        period="forever",
        features=(
            _f("3 AI-generated surveys per month"),
            _f("Basic carbon emission calculations"),
            _f("Watermarked ESG reports"),
            _f("Email support"),
            _f("Real-time tracking", False),
            _f("Custom branding", False),
        ),
        cta="Start Free Trial",
        target="Demo",
    ),
    PricingPlan(
        name="Starter",
        description="Ideal for growing SMEs committed to sustainability",
        price="49",
        period="per month",
        features=(
            _f("20 AI-generated surveys per month"),
            _f("Full carbon emission calculations"),
            _f("Standard ESG report generation"),
            _f("Priority email support"),
            _f("Real-time tracking"),
            _f("Custom branding", False),
        ),
        cta="Get Started",
        target="Demo",
        popular=True,
    ),
    PricingPlan(
        name="Pro",
        description="For businesses seeking comprehensive ESG solutions",
        price="199",
        period="per month",
        features=(
            _f("Unlimited AI-generated surveys"),
            _f("Advanced carbon emission tracking"),
            _f("Compliance-ready reports (HKEX, GRI, TCFD)"),
            _f("Priority 24/7 support"),
            _f("Real-time tracking dashboard"),
            _f("Custom branding"),
        ),
        cta="Get Started",
        target="Demo",
    ),
    PricingPlan(
        name="Enterprise",
        description="Tailored solutions for large corporations",
        price="Custom",
        period="contact us",
        features=(
            _f("Full platform access with API"),
            _f("White-label reporting"),
            _f("Dedicated account manager"),
            _f("Compliance consultation"),
            _f("Custom integration support"),
            _f("SLA guarantee"),
        ),
        cta="Contact Sales",
        target="Contact",
    ),
)

FAQS: Tuple[Tuple[str, str], ...] = (
    (
        "Can I cancel anytime?",
        "Yes, you can cancel your subscription at any time. You'll continue to have access to your "
        "plan until the end of your billing period.",
    ),
    (
        "Is there a free trial?",
        "Yes, we offer a free trial with our Free plan that includes basic features to help you "
        "explore our platform.",
    ),
    (
        "How does billing work?",
        "We bill monthly or annually, with significant savings on annual plans. All major credit "
        "cards are accepted.",
    ),
    (
        "Can I switch plans later?",
        "Yes, you can upgrade or downgrade your plan at any time. Changes will be reflected in your "
        "next billing cycle.",
    ),
)


def plan_comparison(plans: Tuple[PricingPlan, ...] = PRICING_PLANS) -> pd.DataFrame:
    """Plan x feature matrix. Plans list different feature rows, so missing cells are "—"."""
    rows: List[str] = []
    for p in plans:
        for feat in p.features:
            if feat.text not in rows:
                rows.append(feat.text)

    data = {}
    for p in plans:
        marks = {feat.text: ("✅" if feat.included else "❌") for feat in p.features}
        data[p.name] = [marks.get(r, "—") for r in rows]

    df = pd.DataFrame(data, index=rows)
    df.index.name = "Feature"
    return df
