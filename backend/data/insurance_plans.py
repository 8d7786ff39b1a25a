"""Default plan catalog shipped with the application."""

COVERAGE_FIELDS = (
    "hospital_care",
    "outpatient_care",
    "emergency_care",
    "prescription_drugs",
    "preventive_care",
    "mental_health",
    "dental_care",
    "vision_care",
)


def _coverage(*amounts):
    return dict(zip(COVERAGE_FIELDS, amounts))


DEFAULT_PLANS = [
    # Basic plans (level 1+)
    {
        "id": "basic-starter",
        "name": "Starter Health Plan",
        "category": "basic",
        "base_price": 89,
        "coverage": _coverage(10000, 2000, 5000, 1000, 500, 500, 0, 0),
        "deductible": 2000,
        "out_of_pocket_max": 8000,
        "age_groups": ["18-25", "26-35"],
        "risk_categories": ["low"],
        "features": [
            "Basic emergency coverage",
            "Preventive care included",
            "Generic prescription coverage",
            "Telehealth consultations",
        ],
        "description": "Perfect for young, healthy individuals who need basic coverage for unexpected medical events.",
        "min_level": 1,
        "is_popular": True,
    },
    {
        "id": "basic-essential",
        "name": "Essential Care Plan",
        "category": "basic",
        "base_price": 129,
        "coverage": _coverage(25000, 5000, 10000, 2500, 1000, 1000, 500, 300),
        "deductible": 1500,
        "out_of_pocket_max": 6500,
        "age_groups": ["18-25", "26-35", "36-45"],
        "risk_categories": ["low", "moderate"],
        "features": [
            "Enhanced outpatient care",
            "Mental health support",
            "Basic dental and vision",
            "Chronic disease management",
            "Health coaching",
        ],
        "description": "Comprehensive basic coverage with essential health services for individuals and young families.",
        "min_level": 1,
    },
    # Standard plans (level 2+)
    {
        "id": "standard-family",
        "name": "Family Protection Plan",
        "category": "standard",
        "base_price": 189,
        "coverage": _coverage(50000, 15000, 25000, 5000, 2000, 3000, 1500, 800),
        "deductible": 1000,
        "out_of_pocket_max": 5000,
        "age_groups": ["26-35", "36-45", "46-55"],
        "risk_categories": ["low", "moderate"],
        "features": [
            "Family-friendly coverage",
            "Maternity and newborn care",
            "Pediatric services",
            "Specialist consultations",
            "Prescription drug coverage",
            "Annual health assessments",
        ],
        "description": "Designed for families with comprehensive coverage for all family members.",
        "min_level": 2,
        "is_popular": True,
    },
    {
        "id": "standard-active",
        "name": "Active Lifestyle Plan",
        "category": "standard",
        "base_price": 169,
        "coverage": _coverage(40000, 12000, 20000, 4000, 3000, 2500, 1200, 600),
        "deductible": 800,
        "out_of_pocket_max": 4500,
        "age_groups": ["18-25", "26-35", "36-45"],
        "risk_categories": ["low"],
        "features": [
            "Sports injury coverage",
            "Physical therapy",
            "Nutritionist consultations",
            "Fitness program discounts",
            "Wellness rewards",
            "Alternative medicine coverage",
        ],
        "description": "Perfect for active individuals with coverage for sports-related injuries and wellness services.",
        "min_level": 2,
    },
    # Premium plans (level 3+)
    {
        "id": "premium-complete",
        "name": "Complete Care Premium",
        "category": "premium",
        "base_price": 289,
        "coverage": _coverage(100000, 30000, 50000, 10000, 5000, 6000, 3000, 1500),
        "deductible": 500,
        "out_of_pocket_max": 3000,
        "age_groups": ["26-35", "36-45", "46-55", "56-65"],
        "risk_categories": ["low", "moderate", "high"],
        "features": [
            "Comprehensive specialist care",
            "Advanced diagnostic testing",
            "Premium hospital rooms",
            "Concierge medical services",
            "International coverage",
            "Second opinion services",
            "Executive health programs",
        ],
        "description": "Premium coverage with access to top specialists and comprehensive medical services.",
        "min_level": 3,
        "is_popular": True,
    },
    {
        "id": "premium-executive",
        "name": "Executive Health Plan",
        "category": "premium",
        "base_price": 349,
        "coverage": _coverage(150000, 40000, 75000, 15000, 8000, 8000, 4000, 2000),
        "deductible": 250,
        "out_of_pocket_max": 2000,
        "age_groups": ["36-45", "46-55", "56-65"],
        "risk_categories": ["low", "moderate"],
        "features": [
            "VIP treatment at all facilities",
            "Same-day specialist appointments",
            "Personal health coordinator",
            "Advanced preventive screening",
            "Luxury amenities",
            "Global emergency coverage",
            "Experimental treatment coverage",
        ],
        "description": "Elite healthcare experience with personalized service and premium benefits.",
        "min_level": 3,
    },
    # Comprehensive plans (level 4+)
    {
        "id": "comprehensive-senior",
        "name": "Senior Care Comprehensive",
        "category": "comprehensive",
        "base_price": 419,
        "coverage": _coverage(200000, 50000, 100000, 20000, 10000, 10000, 5000, 3000),
        "deductible": 300,
        "out_of_pocket_max": 1500,
        "age_groups": ["46-55", "56-65", "65+"],
        "risk_categories": ["moderate", "high"],
        "features": [
            "Specialized geriatric care",
            "Chronic disease management",
            "Home health services",
            "Long-term care options",
            "Medication management",
            "Fall prevention programs",
            "Cognitive health support",
            "Caregiver support services",
        ],
        "description": "Comprehensive coverage designed specifically for seniors with age-related health needs.",
        "min_level": 4,
    },
    {
        "id": "comprehensive-platinum",
        "name": "Platinum Elite Plan",
        "category": "comprehensive",
        "base_price": 549,
        "coverage": _coverage(500000, 100000, 200000, 50000, 20000, 20000, 10000, 5000),
        "deductible": 0,
        "out_of_pocket_max": 1000,
        "age_groups": ["36-45", "46-55", "56-65", "65+"],
        "risk_categories": ["high"],
        "features": [
            "No deductible coverage",
            "Unlimited specialist visits",
            "Premium facility access",
            "Experimental treatment coverage",
            "Organ transplant coverage",
            "Stem cell therapy",
            "Personalized medicine",
            "Concierge service 24/7",
            "Global medical evacuation",
        ],
        "description": "Ultimate healthcare coverage with no limits and access to cutting-edge treatments.",
        "min_level": 4,
    },
    # Specialized plans
    {
        "id": "specialized-chronic",
        "name": "Chronic Care Specialist",
        "category": "standard",
        "base_price": 229,
        "coverage": _coverage(75000, 25000, 35000, 12000, 4000, 5000, 2000, 1000),
        "deductible": 600,
        "out_of_pocket_max": 3500,
        "age_groups": ["26-35", "36-45", "46-55", "56-65"],
        "risk_categories": ["moderate", "high"],
        "features": [
            "Diabetes management program",
            "Heart disease support",
            "Cancer care coordination",
            "Specialized pharmacy network",
            "Disease-specific education",
            "Remote monitoring devices",
            "Care coordination team",
        ],
        "description": "Specialized coverage for individuals with chronic conditions requiring ongoing medical care.",
        "min_level": 2,
    },
    {
        "id": "specialized-wellness",
        "name": "Wellness Champion Plan",
        "category": "standard",
        "base_price": 159,
        "coverage": _coverage(30000, 10000, 15000, 3000, 5000, 4000, 2000, 1000),
        "deductible": 750,
        "out_of_pocket_max": 4000,
        "age_groups": ["18-25", "26-35", "36-45"],
        "risk_categories": ["low"],
        "features": [
            "Fitness program coverage",
            "Nutrition counseling",
            "Wellness coaching",
            "Health screening bonuses",
            "Mental wellness programs",
            "Stress management courses",
            "Sleep therapy coverage",
        ],
        "description": "Focus on preventive care and wellness with enhanced benefits for healthy lifestyle choices.",
        "min_level": 2,
    },
]
