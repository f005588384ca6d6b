"""Curated advocacy organizations offered as further-action suggestions.

Each record is a plain dict so the list can be reviewed like a data file;
``OrganizationEntry.from_dict`` turns records into catalog entries.

Advocacy tags use one vocabulary: ``{subject}_{action}`` where action is
``slash``, ``fund`` or ``review``, plus bare topical tags that only match
the budget-balancing concern or nothing at all. Subjects are either
spending item ids (``pentagon``, ``snap``) or the broader categories those
items roll up to (``military_spending``, ``food_security``).
"""

ORGANIZATIONS = [
    # Peace & Demilitarization
    {
        "name": "Peace Action",
        "url": "https://www.peaceaction.org/",
        "description": "Works to promote peace and demilitarization through grassroots organizing and advocacy.",
        "icon": "HandHeart",
        "main_category": "Peace & Demilitarization",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("grassroots", "established", "activism"),
        "advocacy_tags": (
            "peace", "anti_war", "demilitarization", "nuclear_disarmament", "diplomacy_first",
            "military_spending_slash", "pentagon_slash", "israel_wars_slash",
            "foreign_military_aid_slash", "arms_transfers_slash", "nuclear_arms_slash",
            "diplomacy_fund",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "Friends Committee on National Legislation (FCNL)",
        "url": "https://www.fcnl.org/",
        "description": "A Quaker lobby in the public interest, working for peace, justice, and environmental stewardship.",
        "icon": "Scale",
        "main_category": "Peace & Social Justice",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("grassroots", "established", "think-tank"),
        "advocacy_tags": (
            "peace", "social_justice", "human_rights", "environmental_stewardship",
            "military_spending_slash", "pentagon_review", "diplomacy_fund",
            "foreign_aid_review", "federal_prisons_review", "criminal_justice_review",
            "poverty_reduction_fund",
        ),
        "badge_profile": "triple-focused",
    },
    {
        "name": "Win Without War",
        "url": "https://winwithoutwar.org/",
        "description": "Advocates for a more progressive U.S. foreign policy centered on diplomacy and demilitarization.",
        "icon": "Globe",
        "main_category": "Peace & Demilitarization",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("grassroots", "think-tank"),
        "advocacy_tags": (
            "anti_war", "demilitarization", "military_spending_slash", "diplomacy_fund",
            "foreign_aid_fund", "usaid_fund", "foreign_policy_review", "israel_wars_review",
            "middle_east_conflict_review",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "Council for a Livable World",
        "url": "https://livableworld.org/",
        "description": "Advocates for policies to reduce the danger of nuclear weapons and promote national security.",
        "icon": "ShieldAlert",
        "main_category": "Peace & Demilitarization",
        "prominence": "medium",
        "focus_type": "niche",
        "org_types": ("research", "established", "think-tank"),
        "advocacy_tags": (
            "arms_control", "nuclear_disarmament", "nuclear_weapons_slash",
            "nuclear_weapons_review", "nuclear_arms_slash", "nuclear_arms_review",
            "defense_review", "pentagon_review",
        ),
        "badge_profile": "single-prominent",
    },
    {
        "name": "Code Pink",
        "url": "https://www.codepink.org/",
        "description": "A women-led grassroots organization working to end U.S. wars and militarism, support peace and human rights initiatives, and redirect resources to healthcare, education, green jobs and other life-affirming programs.",
        "icon": "Dove",
        "main_category": "Peace & Demilitarization",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("grassroots", "activism"),
        "advocacy_tags": (
            "anti_war", "peace", "demilitarization", "military_spending_slash",
            "pentagon_slash", "israel_wars_slash", "arms_transfers_slash",
            "middle_east_conflict_slash", "diplomacy_fund", "social_safety_net_fund",
        ),
        "badge_profile": "double-diverse",
    },

    # Human Rights & Regional Conflicts
    {
        "name": "US Campaign for Palestinian Rights (USCPR)",
        "url": "https://uscpr.org/",
        "description": "A national coalition working for Palestinian rights and an end to U.S. support for Israeli occupation.",
        "icon": "Landmark",
        "main_category": "Human Rights & Regional Conflicts",
        "prominence": "high",
        "focus_type": "niche",
        "org_types": ("grassroots", "activism"),
        "advocacy_tags": (
            "palestinian_rights", "human_rights", "middle_east_peace", "israel_wars_slash",
            "middle_east_conflict_slash", "foreign_military_aid_slash", "arms_transfers_slash",
        ),
        "badge_profile": "single-prominent",
    },
    {
        "name": "Jewish Voice for Peace (JVP)",
        "url": "https://www.jewishvoiceforpeace.org/",
        "description": "A progressive Jewish anti-Zionist organization working for peace, justice, and human rights.",
        "icon": "Users",
        "main_category": "Human Rights & Regional Conflicts",
        "prominence": "high",
        "focus_type": "niche",
        "org_types": ("grassroots", "activism"),
        "advocacy_tags": (
            "palestinian_rights", "anti_war", "social_justice", "human_rights",
            "israel_wars_slash", "middle_east_conflict_slash", "arms_transfers_slash",
        ),
        "badge_profile": "single-prominent",
    },
    {
        "name": "Amnesty International USA",
        "url": "https://www.amnestyusa.org/",
        "description": "Works to protect people wherever justice, freedom, truth and dignity are denied.",
        "icon": "Globe",
        "main_category": "Human Rights & Regional Conflicts",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("grassroots", "established", "activism"),
        "advocacy_tags": (
            "human_rights", "international_justice", "refugee_rights", "arms_control",
            "foreign_military_aid_review", "arms_transfers_review", "israel_wars_review",
            "refugee_assistance_fund", "refugees_fund",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "Human Rights Watch",
        "url": "https://www.hrw.org/",
        "description": "Defends and protects human rights worldwide. Investigates and reports on abuses, holds abusers accountable, and challenges governments and those who hold power to end abusive practices and respect international human rights law.",
        "icon": "Eye",
        "main_category": "Human Rights & Regional Conflicts",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("research", "established"),
        "advocacy_tags": (
            "human_rights", "international_justice", "accountability_for_abuses",
            "foreign_military_aid_review", "arms_transfers_review", "israel_wars_review",
            "middle_east_conflict_review", "deportations_border_review",
            "immigration_enforcement_review",
        ),
        "badge_profile": "triple-focused",
    },

    # Budget & Fiscal Responsibility
    {
        "name": "National Priorities Project (Institute for Policy Studies)",
        "url": "https://nationalpriorities.org/",
        "description": "Analyzes and advocates for a federal budget that prioritizes peace, economic opportunity, and a healthy environment.",
        "icon": "PieChart",
        "main_category": "Fiscal Responsibility",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("research", "think-tank"),
        "advocacy_tags": (
            "budget_transparency", "tax_fairness", "fiscal_responsibility",
            "military_spending_slash", "pentagon_slash", "pentagon_review", "f35_slash",
            "nuclear_weapons_slash", "social_safety_net_fund", "national_debt_review",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "Taxpayers for Common Sense",
        "url": "https://www.taxpayer.net/",
        "description": "A non-partisan budget watchdog organization working to ensure taxpayer dollars are spent responsibly.",
        "icon": "SearchCheck",
        "main_category": "Fiscal Responsibility",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("research", "established"),
        "advocacy_tags": (
            "fiscal_responsibility", "budget_transparency", "government_accountability",
            "government_waste_slash", "federal_contracting_slash", "pentagon_contractors_slash",
            "pentagon_slash", "f35_slash", "nasa_spacex_review", "farm_subsidies_slash",
            "fsa_slash", "usps_slash", "national_debt_review",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "Committee for a Responsible Federal Budget (CRFB)",
        "url": "https://www.crfb.org/",
        "description": "A nonpartisan, non-profit organization committed to educating the public and policymakers about fiscal policy issues.",
        "icon": "Banknote",
        "main_category": "Fiscal Responsibility",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("research", "established", "think-tank"),
        "advocacy_tags": (
            "fiscal_responsibility", "debt_reduction", "budget_transparency",
            "national_debt_review", "national_debt_slash", "entitlements_review",
            "tax_policy_review", "medicare_review", "medicaid_review", "snap_review",
            "child_tax_credit_review",
        ),
        "badge_profile": "triple-focused",
    },
    {
        "name": "Cato Institute",
        "url": "https://www.cato.org/",
        "description": "A public policy research organization—a think tank—dedicated to the principles of individual liberty, limited government, free markets, and peace.",
        "icon": "LibrarySquare",
        "main_category": "Fiscal Responsibility",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("think-tank", "research", "established"),
        "advocacy_tags": (
            "limited_government", "free_markets", "individual_liberty", "fiscal_responsibility",
            "debt_reduction", "pentagon_review", "tax_policy_review", "entitlements_review",
            "epa_slash", "dept_education_slash", "farm_subsidies_slash",
            "medicaid_slash", "social_safety_net_slash",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "The Heritage Foundation",
        "url": "https://www.heritage.org/",
        "description": "A research and educational institution whose mission is to formulate and promote conservative public policies based on the principles of free enterprise, limited government, individual freedom, traditional American values, and a strong national defense.",
        "icon": "Landmark",
        "main_category": "Fiscal Responsibility",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("think-tank", "research", "established"),
        "advocacy_tags": (
            "conservative_policy", "limited_government", "free_enterprise",
            "strong_national_defense", "fiscal_responsibility", "debt_reduction",
            "pentagon_fund", "defense_fund", "tax_policy_review", "irs_slash",
            "dept_education_slash", "social_safety_net_review", "medicaid_review",
        ),
        "badge_profile": "double-diverse",
    },

    # Healthcare
    {
        "name": "Physicians for a National Health Program (PNHP)",
        "url": "https://pnhp.org/",
        "description": "Advocates for a universal, comprehensive single-payer national health program.",
        "icon": "HeartPulse",
        "main_category": "Healthcare",
        "prominence": "medium",
        "focus_type": "niche",
        "org_types": ("grassroots", "think-tank"),
        "advocacy_tags": (
            "single_payer", "health_equity", "health_fund", "health_review", "medicare_fund",
            "medicaid_fund", "nih_fund", "substance_mental_health_fund",
        ),
        "badge_profile": "single-prominent",
    },
    {
        "name": "National Alliance on Mental Illness (NAMI)",
        "url": "https://www.nami.org/",
        "description": "The nation's largest grassroots mental health organization dedicated to building better lives for Americans affected by mental illness.",
        "icon": "Brain",
        "main_category": "Healthcare",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("grassroots", "established", "direct-service"),
        "advocacy_tags": (
            "mental_health_fund", "substance_mental_health_fund", "health_equity",
            "public_health_fund", "cdc_fund", "nih_fund", "va_fund", "medicaid_fund",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "Families USA",
        "url": "https://familiesusa.org/",
        "description": "A leading national, non-partisan voice for health care consumers, dedicated to the achievement of high-quality, affordable health care and improved health for all.",
        "icon": "Users",
        "main_category": "Healthcare",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("research", "established", "think-tank"),
        "advocacy_tags": (
            "health_fund", "health_review", "medicaid_fund", "medicare_fund", "health_equity",
            "affordable_care_act_fund", "social_safety_net_fund",
        ),
        "badge_profile": "double-diverse",
    },

    # Environment & Energy
    {
        "name": "Environmental Working Group (EWG)",
        "url": "https://www.ewg.org/",
        "description": "A non-profit, non-partisan organization dedicated to protecting human health and the environment.",
        "icon": "Leaf",
        "main_category": "Environment & Energy",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("research", "established"),
        "advocacy_tags": (
            "environmental_protection", "toxic_chemicals", "environment_fund", "epa_fund",
            "pollution_fund", "sustainable_agriculture", "food_safety_fund",
            "clean_energy_fund", "renewable_energy_fund", "fsa_review", "agriculture_review",
        ),
        "badge_profile": "triple-focused",
    },
    {
        "name": "Sierra Club",
        "url": "https://www.sierraclub.org/",
        "description": "Grassroots environmental organization in the United States. Founded by legendary conservationist John Muir in 1892.",
        "icon": "Mountain",
        "main_category": "Environment & Energy",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("grassroots", "established", "legal", "activism"),
        "advocacy_tags": (
            "environmental_protection", "wilderness_protection", "climate_fund",
            "clean_energy_fund", "renewable_energy_fund", "nps_fund", "forest_service_fund",
            "public_lands_fund", "conservation_fund", "epa_fund", "noaa_fund",
            "environment_fund",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "Natural Resources Defense Council (NRDC)",
        "url": "https://www.nrdc.org/",
        "description": "Works to safeguard the earth—its people, its plants and animals, and the natural systems on which all life depends.",
        "icon": "Trees",
        "main_category": "Environment & Energy",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("legal", "research", "established"),
        "advocacy_tags": (
            "environmental_protection", "ocean_conservation", "environment_fund", "epa_fund",
            "climate_fund", "renewable_energy_fund", "clean_energy_fund", "noaa_fund",
            "forest_service_fund", "usaid_climate_fund", "pollution_fund",
        ),
        "badge_profile": "triple-focused",
    },
    {
        "name": "Earthjustice",
        "url": "https://earthjustice.org/",
        "description": "A nonprofit public interest environmental law organization. They wield the power of law and the strength of partnership to protect people's health, to preserve magnificent places and wildlife, to advance clean energy, and to combat climate change.",
        "icon": "Gavel",
        "main_category": "Environment & Energy",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("legal", "established"),
        "advocacy_tags": (
            "environmental_law", "environmental_justice", "wilderness_protection",
            "ocean_conservation", "epa_fund", "climate_fund", "renewable_energy_review",
            "forest_service_review", "public_lands_review", "pollution_fund",
        ),
        "badge_profile": "single-prominent",
    },
    {
        "name": "Rainforest Action Network",
        "url": "https://www.ran.org/",
        "description": "Preserves forests, protects the climate and upholds human rights by challenging corporate power and systemic injustice through frontline partnerships and strategic campaigns.",
        "icon": "Sprout",
        "main_category": "Environment & Energy",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("grassroots", "activism"),
        "advocacy_tags": (
            "forest_protection", "corporate_accountability", "human_rights",
            "environmental_justice", "climate_fund", "fossil_fuel_subsidies_slash",
            "forest_service_fund", "conservation_fund",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "Greenpeace USA",
        "url": "https://www.greenpeace.org/usa/",
        "description": "Uses non-violent creative action to pave the way towards a greener, more peaceful world, and to confront the systems that threaten our environment.",
        "icon": "Globe",
        "main_category": "Environment & Energy",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("grassroots", "activism", "established"),
        "advocacy_tags": (
            "environmental_protection", "ocean_conservation", "deforestation",
            "plastic_pollution", "climate_fund", "renewable_energy_fund", "clean_energy_fund",
            "epa_fund", "environment_fund",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "League of Conservation Voters (LCV)",
        "url": "https://www.lcv.org/",
        "description": "Advocates for sound environmental laws and policies, holds elected officials accountable for their votes and actions, and elects pro-environment candidates.",
        "icon": "Vote",
        "main_category": "Environment & Energy",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("activism", "established"),
        "advocacy_tags": (
            "environmental_policy", "climate_fund", "epa_fund", "renewable_energy_fund",
            "clean_energy_fund", "environment_fund", "pollution_fund",
        ),
        "badge_profile": "single-prominent",
    },

    # Science & Technology
    {
        "name": "The Planetary Society",
        "url": "https://www.planetary.org/",
        "description": "Empowers the world's citizens to advance space science and exploration.",
        "icon": "Rocket",
        "main_category": "Science & Technology",
        "prominence": "medium",
        "focus_type": "niche",
        "org_types": ("grassroots", "research"),
        "advocacy_tags": (
            "space_exploration", "nasa_fund", "space_fund", "science_fund", "nsf_fund",
            "nasa_review", "nasa_spacex_review",
        ),
        "badge_profile": "single-prominent",
    },
    {
        "name": "Union of Concerned Scientists",
        "url": "https://www.ucsusa.org/",
        "description": "Puts rigorous, independent science to work to solve our planet's most pressing problems.",
        "icon": "FlaskConical",
        "main_category": "Science & Technology",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("research", "established", "think-tank"),
        "advocacy_tags": (
            "scientific_integrity", "environmental_protection", "science_fund",
            "basic_research_fund", "climate_fund", "nuclear_weapons_review",
            "nuclear_arms_review", "sustainable_agriculture", "epa_review", "nsf_review",
            "nasa_review",
        ),
        "badge_profile": "triple-focused",
    },
    {
        "name": "Federation of American Scientists (FAS)",
        "url": "https://fas.org/",
        "description": "Provides science-based analysis of and solutions to protect against catastrophic threats to national and international security.",
        "icon": "Atom",
        "main_category": "Science & Technology",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("research", "think-tank", "established"),
        "advocacy_tags": (
            "science_policy", "arms_control", "emerging_tech_policy", "science_fund",
            "defense_review", "nuclear_weapons_review", "nuclear_arms_review",
        ),
        "badge_profile": "double-diverse",
    },

    # Civil Rights & Social Justice
    {
        "name": "American Civil Liberties Union (ACLU)",
        "url": "https://www.aclu.org/",
        "description": "Works to defend and preserve the individual rights and liberties guaranteed by the Constitution and laws of the United States.",
        "icon": "Gavel",
        "main_category": "Civil Rights & Social Justice",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("legal", "established", "grassroots", "activism"),
        "advocacy_tags": (
            "civil_rights", "civil_liberties", "privacy_rights", "government_accountability",
            "immigration_review", "deportations_border_review", "immigration_enforcement_slash",
            "federal_prisons_review", "criminal_justice_review", "surveillance_review",
            "public_defenders_fund", "nlrb_review",
        ),
        "badge_profile": "triple-focused",
    },
    {
        "name": "NAACP Legal Defense and Educational Fund (LDF)",
        "url": "https://www.naacpldf.org/",
        "description": "America's premier legal organization fighting for racial justice.",
        "icon": "Scale",
        "main_category": "Civil Rights & Social Justice",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("legal", "established"),
        "advocacy_tags": (
            "racial_justice", "civil_rights", "civil_rights_fund", "voting_rights",
            "education_equity", "criminal_justice_review", "mbda_fund", "economic_justice_fund",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "Southern Poverty Law Center (SPLC)",
        "url": "https://www.splcenter.org/",
        "description": "Dedicated to fighting hate and bigotry and to seeking justice for the most vulnerable members of our society.",
        "icon": "ShieldCheck",
        "main_category": "Civil Rights & Social Justice",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("legal", "research", "established"),
        "advocacy_tags": (
            "anti_hate", "civil_rights", "civil_rights_fund", "racial_justice",
            "immigrant_rights", "lgbtq_rights", "criminal_justice_review",
            "immigration_enforcement_review",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "Electronic Frontier Foundation (EFF)",
        "url": "https://www.eff.org/",
        "description": "Defending civil liberties in the digital world. Works on issues of free speech, privacy, innovation, and consumer rights online.",
        "icon": "ShieldCheck",
        "main_category": "Civil Rights & Social Justice",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("legal", "research", "established", "activism"),
        "advocacy_tags": (
            "digital_rights", "privacy_rights", "free_speech_online", "surveillance_review",
            "cfpb_review", "tsa_review", "transportation_security_review",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "The Marshall Project",
        "url": "https://www.themarshallproject.org/",
        "description": "A nonpartisan, nonprofit news organization that seeks to create and sustain a sense of national urgency about the U.S. criminal justice system.",
        "icon": "Newspaper",
        "main_category": "Civil Rights & Social Justice",
        "prominence": "medium",
        "focus_type": "niche",
        "org_types": ("research",),
        "advocacy_tags": (
            "criminal_justice_review", "federal_prisons_review", "prisons_review",
            "racial_justice", "public_defenders_fund", "deportations_border_review",
        ),
        "badge_profile": "single-prominent",
    },

    # Democracy & Governance
    {
        "name": "Common Cause",
        "url": "https://www.commoncause.org/",
        "description": "A nonpartisan grassroots organization dedicated to upholding the core values of American democracy.",
        "icon": "Vote",
        "main_category": "Democracy & Governance",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("grassroots", "established"),
        "advocacy_tags": (
            "democracy", "voting_rights", "campaign_finance", "ethics_in_government",
            "government_accountability", "irs_review", "federal_courts_review", "usps_review",
            "government_operations_review",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "Brennan Center for Justice",
        "url": "https://www.brennancenter.org/",
        "description": "A nonpartisan law and policy institute that works to reform, revitalize, and when necessary, defend our country's systems of democracy and justice.",
        "icon": "LibrarySquare",
        "main_category": "Democracy & Governance",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("research", "legal", "established", "think-tank"),
        "advocacy_tags": (
            "democracy", "voting_rights", "campaign_finance", "criminal_justice_review",
            "justice_system_review", "federal_courts_review", "courts_review",
            "public_defenders_fund", "federal_prisons_review", "prisons_review",
        ),
        "badge_profile": "triple-focused",
    },
    {
        "name": "Center for Responsive Politics (OpenSecrets)",
        "url": "https://www.opensecrets.org/",
        "description": "Tracks money in U.S. politics and its effect on elections and public policy.",
        "icon": "DollarSign",
        "main_category": "Democracy & Governance",
        "prominence": "high",
        "focus_type": "niche",
        "org_types": ("research", "established"),
        "advocacy_tags": (
            "campaign_finance", "government_accountability", "ethics_in_government",
            "lobbying_transparency", "pentagon_contractors_review",
            "federal_contracting_review",
        ),
        "badge_profile": "single-prominent",
    },
    {
        "name": "Demand Progress",
        "url": "https://demandprogress.org/",
        "description": "Fights for a more just and democratic world by organizing for progressive policy changes on issues of surveillance, money in politics, and corporate power.",
        "icon": "Megaphone",
        "main_category": "Democracy & Governance",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("grassroots", "activism"),
        "advocacy_tags": (
            "democracy", "anti_surveillance", "corporate_accountability",
            "government_accountability", "privacy_rights", "cfpb_fund",
            "consumer_protection_fund", "nlrb_fund", "labor_fund", "tsa_review",
            "surveillance_review",
        ),
        "badge_profile": "double-diverse",
    },

    # Government Accountability
    {
        "name": "Project On Government Oversight (POGO)",
        "url": "https://www.pogo.org/",
        "description": "A nonpartisan independent watchdog that investigates and exposes waste, corruption, and abuse of power.",
        "icon": "Eye",
        "main_category": "Government Accountability",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("research", "established"),
        "advocacy_tags": (
            "government_accountability", "whistleblower_protection", "government_waste_slash",
            "pentagon_contractors_review", "federal_contracting_review", "pentagon_review",
            "pentagon_slash", "f35_review", "weapons_programs_review",
            "military_spending_review", "irs_review", "cfpb_review", "fdic_review",
        ),
        "badge_profile": "triple-focused",
    },
    {
        "name": "ProPublica",
        "url": "https://www.propublica.org/",
        "description": "An independent, nonprofit newsroom that produces investigative journalism with moral force.",
        "icon": "Search",
        "main_category": "Government Accountability",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("research",),
        "advocacy_tags": (
            "government_accountability", "investigative_journalism", "corporate_accountability",
            "pentagon_review", "irs_review", "tax_enforcement_review", "fema_review",
            "disaster_relief_review",
        ),
        "badge_profile": "double-diverse",
    },

    # Education
    {
        "name": "National Education Association (NEA)",
        "url": "https://www.nea.org/",
        "description": "The nation's largest professional employee organization, committed to advancing the cause of public education.",
        "icon": "School",
        "main_category": "Education",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("grassroots", "established", "direct-service"),
        "advocacy_tags": (
            "public_education", "teacher_support", "education_fund", "public_schools_fund",
            "k12_schools_fund", "college_aid_fund", "dept_education_fund", "head_start_fund",
            "early_childhood_fund", "imls_fund", "cpb_fund",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "The Education Trust",
        "url": "https://edtrust.org/",
        "description": "Works to close opportunity gaps that disproportionately affect students of color and students from low-income families.",
        "icon": "GraduationCap",
        "main_category": "Education",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("research", "think-tank", "established"),
        "advocacy_tags": (
            "education_equity", "social_justice", "education_fund", "k12_schools_fund",
            "public_schools_fund", "college_aid_fund", "higher_education_fund",
            "dept_education_review",
        ),
        "badge_profile": "single-prominent",
    },

    # Housing & Homelessness
    {
        "name": "National Low Income Housing Coalition (NLIHC)",
        "url": "https://nlihc.org/",
        "description": "Dedicated solely to achieving socially just public policy that ensures people with the lowest incomes in the United States have affordable and decent homes.",
        "icon": "Home",
        "main_category": "Housing & Community",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("research", "grassroots", "established", "think-tank"),
        "advocacy_tags": (
            "housing_affordability", "homelessness_prevention", "housing_fund", "hud_fund",
            "public_housing_fund", "usich_fund", "homelessness_fund", "liheap_fund",
            "energy_assistance_fund", "social_safety_net_fund",
        ),
        "badge_profile": "triple-focused",
    },
    {
        "name": "National Alliance to End Homelessness",
        "url": "https://endhomelessness.org/",
        "description": "A nonpartisan organization committed to preventing and ending homelessness in the United States.",
        "icon": "Bed",
        "main_category": "Housing & Community",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("research", "established", "direct-service"),
        "advocacy_tags": (
            "homelessness_prevention", "housing_first", "homelessness_fund", "usich_fund",
            "hud_fund", "housing_fund", "public_housing_review", "mental_health_fund",
            "va_fund",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "Habitat for Humanity International",
        "url": "https://www.habitat.org/",
        "description": "A nonprofit organization that helps families build and improve places to call home.",
        "icon": "Hammer",
        "main_category": "Housing & Community",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("grassroots", "direct-service", "established"),
        "advocacy_tags": (
            "housing_affordability", "volunteerism", "housing_review", "hud_review",
            "community_development_fund",
        ),
        "badge_profile": "single-prominent",
    },

    # Food & Agriculture
    {
        "name": "Food Research & Action Center (FRAC)",
        "url": "https://frac.org/",
        "description": "The leading national nonprofit organization working to eradicate poverty-related hunger and undernutrition in the United States.",
        "icon": "Utensils",
        "main_category": "Food & Agriculture",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("research", "established", "think-tank"),
        "advocacy_tags": (
            "anti_hunger", "food_security_fund", "snap_fund", "wic_fund", "school_lunch_fund",
            "nutrition_fund", "child_tax_credit_fund", "social_safety_net_fund", "fsa_review",
        ),
        "badge_profile": "triple-focused",
    },
    {
        "name": "National Sustainable Agriculture Coalition (NSAC)",
        "url": "https://sustainableagriculture.net/",
        "description": "An alliance of grassroots organizations that advocates for federal policy reform to advance the sustainability of agriculture, food systems, natural resources, and rural communities.",
        "icon": "Wheat",
        "main_category": "Food & Agriculture",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("grassroots", "established", "think-tank"),
        "advocacy_tags": (
            "sustainable_agriculture", "food_systems_change", "rural_development",
            "agriculture_review", "farm_subsidies_review", "fsa_review", "conservation_fund",
        ),
        "badge_profile": "double-diverse",
    },

    # Veterans
    {
        "name": "Veterans of Foreign Wars (VFW)",
        "url": "https://www.vfw.org/",
        "description": "A nonprofit veterans service organization comprised of eligible veterans and military service members from the active, guard and reserve forces.",
        "icon": "Medal",
        "main_category": "Veterans Affairs",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("grassroots", "established", "direct-service"),
        "advocacy_tags": (
            "veteran_benefits", "veterans_fund", "va_fund", "va_review", "pact_act_fund",
            "toxic_exposure_fund", "pentagon_personnel_fund", "defense_fund",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "Iraq and Afghanistan Veterans of America (IAVA)",
        "url": "https://iava.org/",
        "description": "The leading post-9/11 veteran empowerment organization (VEO) with the most diverse and rapidly growing membership in America.",
        "icon": "ShieldCheck",
        "main_category": "Veterans Affairs",
        "prominence": "medium",
        "focus_type": "niche",
        "org_types": ("grassroots", "activism"),
        "advocacy_tags": (
            "post_911_veterans", "suicide_prevention", "veterans_fund", "pact_act_fund",
            "toxic_exposure_fund", "mental_health_fund", "va_review",
        ),
        "badge_profile": "single-prominent",
    },

    # Labor & Worker Rights
    {
        "name": "AFL-CIO",
        "url": "https://aflcio.org/",
        "description": "The largest federation of unions in the United States, representing more than 12.5 million working men and women.",
        "icon": "Hammer",
        "main_category": "Labor & Worker Rights",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("grassroots", "established"),
        "advocacy_tags": (
            "labor_rights", "worker_protections", "fair_wages", "job_safety", "labor_fund",
            "nlrb_fund", "tanf_fund", "child_tax_credit_fund", "family_support_fund",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "National Employment Law Project (NELP)",
        "url": "https://www.nelp.org/",
        "description": "A research and advocacy organization that fights for policies to create good jobs, expand access to work, and strengthen protections and support for low-wage workers and the unemployed.",
        "icon": "Briefcase",
        "main_category": "Labor & Worker Rights",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("research", "legal", "think-tank"),
        "advocacy_tags": (
            "worker_rights", "fair_wages", "job_safety", "unemployment_insurance",
            "labor_review", "nlrb_review", "tanf_fund", "social_safety_net_fund",
        ),
        "badge_profile": "double-diverse",
    },

    # Immigration
    {
        "name": "National Immigration Law Center (NILC)",
        "url": "https://www.nilc.org/",
        "description": "Dedicated to defending and advancing the rights of immigrants with low income.",
        "icon": "Anchor",
        "main_category": "Immigration",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("legal", "research", "established"),
        "advocacy_tags": (
            "immigrant_rights", "civil_rights", "immigration_review",
            "deportations_border_review", "immigration_enforcement_slash",
            "refugee_assistance_fund", "refugees_fund", "snap_fund", "medicaid_fund",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "American Immigration Council",
        "url": "https://www.americanimmigrationcouncil.org/",
        "description": "Works to strengthen America by shaping how America thinks about and acts towards immigrants and immigration.",
        "icon": "Users",
        "main_category": "Immigration",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("research", "established", "think-tank"),
        "advocacy_tags": (
            "immigrant_rights", "immigration_research", "immigration_review",
            "deportations_border_review", "immigration_enforcement_review",
            "refugee_assistance_fund",
        ),
        "badge_profile": "single-prominent",
    },
    {
        "name": "RAICES",
        "url": "https://www.raicestexas.org/",
        "description": "A nonprofit agency that promotes justice by providing free and low-cost legal services to underserved immigrant children, families, and refugees.",
        "icon": "Gavel",
        "main_category": "Immigration",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("legal", "direct-service", "grassroots"),
        "advocacy_tags": (
            "immigrant_rights", "legal_aid", "asylum", "refugee_assistance_fund",
            "refugees_fund", "deportations_border_slash", "immigration_enforcement_slash",
            "deportations_border_review",
        ),
        "badge_profile": "double-diverse",
    },

    # Consumer Protection
    {
        "name": "Consumer Federation of America (CFA)",
        "url": "https://consumerfed.org/",
        "description": "An association of non-profit consumer organizations dedicated to advancing the consumer interest through research, advocacy, and education.",
        "icon": "ShoppingCart",
        "main_category": "Consumer Protection",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("research", "established", "think-tank"),
        "advocacy_tags": (
            "consumer_rights", "product_safety", "privacy_rights", "cfpb_fund",
            "consumer_protection_fund", "financial_regulation_review", "fdic_review",
        ),
        "badge_profile": "double-diverse",
    },

    # Transportation
    {
        "name": "Transportation for America",
        "url": "https://t4america.org/",
        "description": "An alliance of elected, business and civic leaders from communities across the country, united to ensure that states and the federal government step up to invest in a modern transportation system.",
        "icon": "Train",
        "main_category": "Transportation",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("think-tank", "activism", "established"),
        "advocacy_tags": (
            "complete_streets", "transportation_review", "transportation_fund",
            "public_transit_fund", "infrastructure_fund", "highways_review", "amtrak_fund",
            "rail_fund", "faa_review",
        ),
        "badge_profile": "single-prominent",
    },

    # Arts & Culture
    {
        "name": "Americans for the Arts",
        "url": "https://www.americansforthearts.org/",
        "description": "The nation's leading nonprofit organization for advancing the arts and arts education.",
        "icon": "Palette",
        "main_category": "Arts & Culture",
        "prominence": "medium",
        "focus_type": "broad",
        "org_types": ("established", "research", "direct-service"),
        "advocacy_tags": (
            "creative_economy", "arts_culture_fund", "cpb_fund", "public_media_fund",
            "imls_fund", "libraries_fund",
        ),
        "badge_profile": "single-prominent",
    },
    {
        "name": "ASPCA (American Society for the Prevention of Cruelty to Animals)",
        "url": "https://www.aspca.org/",
        "description": "Works to save lives and secure compassionate treatment for animals across America.",
        "icon": "PawPrint",
        "main_category": "Animal Welfare",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("established", "activism", "direct-service"),
        "advocacy_tags": (
            "animal_welfare", "animal_protection_laws", "anti_cruelty", "pet_adoption_support",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "The Arc of the United States",
        "url": "https://thearc.org/",
        "description": "Promotes and protects the human rights of people with intellectual and developmental disabilities and actively supports their full inclusion and participation in the community.",
        "icon": "Wheelchair",
        "main_category": "Disability Rights",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("grassroots", "established", "legal"),
        "advocacy_tags": (
            "disability_rights", "inclusion", "education_equity", "medicaid_fund",
            "health_fund", "social_safety_net_fund",
        ),
        "badge_profile": "triple-focused",
    },
    {
        "name": "Center on Budget and Policy Priorities (CBPP)",
        "url": "https://www.cbpp.org/",
        "description": "A nonpartisan research and policy institute pursuing federal and state policies designed to reduce poverty and inequality.",
        "icon": "TrendingUp",
        "main_category": "Economic Justice",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("research", "think-tank", "established"),
        "advocacy_tags": (
            "poverty_reduction_fund", "economic_inequality", "social_safety_net_fund",
            "snap_fund", "wic_fund", "child_tax_credit_fund", "tanf_fund",
            "housing_affordability", "tax_fairness", "tax_policy_review", "medicaid_fund",
        ),
        "badge_profile": "triple-focused",
    },
    {
        "name": "Brookings Institution",
        "url": "https://www.brookings.edu/",
        "description": "A nonprofit public policy organization committed to independent research and policy solutions.",
        "icon": "BuildingIcon",
        "main_category": "Public Policy Research",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("research", "established", "think-tank"),
        "advocacy_tags": (
            "public_policy_research", "economic_policy_review", "foreign_policy_review",
            "social_policy_review", "national_debt_review",
        ),
        "badge_profile": "double-diverse",
    },
    {
        "name": "American Enterprise Institute (AEI)",
        "url": "https://www.aei.org/",
        "description": "A conservative think tank that researches government, politics, economics, and social welfare.",
        "icon": "LibrarySquare",
        "main_category": "Public Policy Research",
        "prominence": "high",
        "focus_type": "broad",
        "org_types": ("research", "established", "think-tank"),
        "advocacy_tags": (
            "conservative_policy", "free_enterprise", "limited_government",
            "economic_policy_review", "defense_fund", "pentagon_fund", "entitlements_review",
            "national_debt_review",
        ),
        "badge_profile": "double-diverse",
    },
]
