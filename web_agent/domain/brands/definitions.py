"""Static brand definitions."""

from web_agent.domain.brands.registry import BrandConfiguration, BrandId

MASTER = BrandConfiguration(
    brand=BrandId.MASTER,
    name="Master",
    prompt=BrandId.MASTER,
    theme="master-dark",
    primary_color="#FFFFFF",
    avatar="/master-icon.png",
    quick_buttons=(
        "What is Master?",
        "How does it work?",
        "Talk to the Team",
    ),
)

PROXE = BrandConfiguration(
    brand=BrandId.PROXE,
    name="PROXe",
    prompt=BrandId.PROXE,
    theme="proxe-purple",
    primary_color="#8B5CF6",
    avatar="/proxe-icon.png",
    quick_buttons=(
        "What is PROXe?",
        "Book a Demo",
        "See Features",
    ),
    explore_buttons=(
        "Web Agent",
        "WhatsApp Agent",
        "Lead Dashboard",
        "Analytics",
    ),
)

WINDCHASERS = BrandConfiguration(
    brand=BrandId.WINDCHASERS,
    name="Windchasers",
    prompt=BrandId.WINDCHASERS,
    theme="aviation-gold",
    primary_color="#C9A961",
    avatar="/windchasers-icon.png",
    quick_buttons=(
        "Start Pilot Training",
        "Book a Demo Session",
        "Explore Training Options",
    ),
    explore_buttons=(
        "Airline Pilot Training",
        "Helicopter Pilot Training",
        "Cabin Crew Training",
        "Drone Pilot Training",
    ),
)

BCON = BrandConfiguration(
    brand=BrandId.BCON,
    name="BCON Club",
    prompt=BrandId.BCON,
    theme="bcon-electric",
    primary_color="#8B5CF6",
    avatar="/bcon-icon.png",
    quick_buttons=(
        "Explore AI Solutions",
        "Book a Strategy Call",
        "See Our Work",
    ),
    explore_buttons=(
        "AI in Business",
        "Brand Marketing",
        "Business Apps",
        "PROXe Platform",
    ),
)

BRAND_CONFIGURATIONS = (MASTER, PROXE, WINDCHASERS, BCON)
