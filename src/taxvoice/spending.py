"""Static federal tax spending breakdown.

Figures come from a reference return of $52,000 in federal income tax.
Percentages and per-dollar amounts are derived from that reference, so the
breakdown is the same for every user regardless of location or tax paid.
"""

import logging
from dataclasses import dataclass, field, asdict
from typing import Optional

logger = logging.getLogger(__name__)

REFERENCE_TOTAL_TAX = 52000


@dataclass
class SpendingItem:
    """A single line item inside a spending category."""
    id: str
    description: str
    amount: float
    tooltip: Optional[str] = None
    wiki_link: Optional[str] = None

    @property
    def amount_per_dollar(self) -> float:
        return self.amount / REFERENCE_TOTAL_TAX

    def to_dict(self):
        data = asdict(self)
        data["amount_per_dollar"] = self.amount_per_dollar
        return data


@dataclass
class SpendingCategory:
    """A top-level spending category and its line items."""
    id: str
    name: str
    amount: float
    items: list[SpendingItem] = field(default_factory=list)
    tooltip: Optional[str] = None

    @property
    def percentage(self) -> float:
        return self.amount / REFERENCE_TOTAL_TAX * 100

    def to_dict(self):
        return {
            "id": self.id,
            "category": self.name,
            "percentage": self.percentage,
            "tooltip": self.tooltip,
            "items": [item.to_dict() for item in self.items],
        }


SPENDING_CATEGORIES = [
    SpendingCategory(
        id="health",
        name="Health",
        amount=12906.86,
        items=[
            SpendingItem(
                id="medicaid",
                description="Medicaid",
                amount=5336.01,
                tooltip="Provides health coverage for low-income individuals and families, jointly funded by federal and state governments.",
                wiki_link="https://en.wikipedia.org/wiki/Medicaid",
            ),
            SpendingItem(
                id="medicare",
                description="Medicare",
                amount=4854.13,
                tooltip="Federal health insurance program primarily for people aged 65 or older, and some younger people with disabilities.",
                wiki_link="https://en.wikipedia.org/wiki/Medicare_(United_States)",
            ),
            SpendingItem(
                id="nih",
                description="National Institutes of Health",
                amount=436.73,
                tooltip="The primary U.S. agency responsible for biomedical and public health research.",
                wiki_link="https://en.wikipedia.org/wiki/National_Institutes_of_Health",
            ),
            SpendingItem(
                id="cdc",
                description="Centers for Disease Control & Prevention (CDC)",
                amount=137.72,
                tooltip="National public health agency focused on disease control, prevention, and health promotion.",
                wiki_link="https://en.wikipedia.org/wiki/Centers_for_Disease_Control_and_Prevention",
            ),
            SpendingItem(
                id="substance_mental_health",
                description="Substance use & mental health programs",
                amount=86.89,
                tooltip="Funding for programs addressing substance abuse and mental health issues, primarily via SAMHSA.",
                wiki_link="https://en.wikipedia.org/wiki/Substance_Abuse_and_Mental_Health_Services_Administration",
            ),
        ],
    ),
    SpendingCategory(
        id="war_weapons",
        name="War and Weapons",
        amount=10852.53,
        items=[
            SpendingItem(
                id="pentagon",
                description="Pentagon",
                amount=8574.28,
                tooltip="Overall budget for the United States Department of Defense headquarters and operations.",
                wiki_link="https://en.wikipedia.org/wiki/United_States_Department_of_Defense",
            ),
            SpendingItem(
                id="pentagon_contractors",
                description="Pentagon - Contractors",
                amount=4187.01,
                tooltip="Funds paid to private companies contracted by the Department of Defense for various services, equipment, and research.",
                wiki_link="https://en.wikipedia.org/wiki/Military_contractor",
            ),
            SpendingItem(
                id="pentagon_personnel",
                description="Pentagon - Military Personnel",
                amount=1786.15,
                tooltip="Costs associated with salaries, benefits, housing, and support for active-duty military members.",
                wiki_link="https://en.wikipedia.org/wiki/United_States_Armed_Forces",
            ),
            SpendingItem(
                id="pentagon_top5_contractors",
                description="Pentagon - Top 5 Contractors",
                amount=1137.58,
                tooltip="Spending allocated specifically to the five largest private defense contractors (e.g., Lockheed Martin, Boeing, Raytheon).",
                wiki_link="https://en.wikipedia.org/wiki/List_of_United_States_defense_contractors_by_arms_sales",
            ),
            SpendingItem(
                id="nuclear_weapons",
                description="Nuclear Weapons",
                amount=339.51,
                tooltip="Funding for the development, maintenance, security, and modernization of the U.S. nuclear arsenal, managed by the NNSA.",
                wiki_link="https://en.wikipedia.org/wiki/Nuclear_weapons_of_the_United_States",
            ),
            SpendingItem(
                id="foreign_military_aid",
                description="Aid to foreign militaries",
                amount=258.74,
                tooltip="Financial and material assistance (e.g., weapons, training) provided to the armed forces of other countries.",
                wiki_link="https://en.wikipedia.org/wiki/United_States_Foreign_Military_Financing",
            ),
            SpendingItem(
                id="israel_wars",
                description="Israel wars (Pentagon & aid)",
                amount=214.14,
                tooltip="Specific allocation related to U.S. support for Israel's military and defense, including direct aid and joint military operations.",
                wiki_link="https://en.wikipedia.org/wiki/Israel%E2%80%93United_States_military_relations",
            ),
            SpendingItem(
                id="f35",
                description="F-35 Jet Fighter",
                amount=127.86,
                tooltip="Funding for the F-35 Lightning II program, a family of single-seat, single-engine, all-weather stealth multirole combat aircraft.",
                wiki_link="https://en.wikipedia.org/wiki/Lockheed_Martin_F-35_Lightning_II",
            ),
            SpendingItem(
                id="pentagon_spacex",
                description="Pentagon - SpaceX Contracts",
                amount=17.04,
                tooltip="Contracts awarded by the Department of Defense to SpaceX for national security space launch services and other projects.",
                wiki_link="https://en.wikipedia.org/wiki/SpaceX#Government_contracts",
            ),
            SpendingItem(
                id="pentagon_dei",
                description="Pentagon - Diversity, Equity, Inclusion (DEI)",
                amount=1.08,
                tooltip="Funding allocated to Diversity, Equity, and Inclusion initiatives and programs within the Department of Defense.",
                wiki_link="https://en.wikipedia.org/wiki/Diversity,_equity,_and_inclusion",
            ),
        ],
    ),
    SpendingCategory(
        id="interest_debt",
        name="Interest on Debt",
        amount=10105.93,
        tooltip="This substantial portion represents the cost of servicing the national debt. Decades of deficit spending contribute to this burden, diverting funds from other priorities.",
    ),
    SpendingCategory(
        id="veterans",
        name="Veterans",
        amount=3253.81,
        items=[
            SpendingItem(
                id="va",
                description="Veterans' Affairs (VA)",
                amount=3251.63,
                tooltip="Provides a wide range of services including healthcare, disability compensation, education benefits (GI Bill), home loans, and burial benefits to U.S. military veterans.",
                wiki_link="https://en.wikipedia.org/wiki/United_States_Department_of_Veterans_Affairs",
            ),
            SpendingItem(
                id="pact_act",
                description="Veterans Toxic Exposure Fund (PACT Act)",
                amount=189.31,
                tooltip="Specifically funds healthcare, research, and benefits for veterans exposed to burn pits, Agent Orange, and other toxic substances during military service.",
                wiki_link="https://en.wikipedia.org/wiki/PACT_Act",
            ),
        ],
    ),
    SpendingCategory(
        id="unemployment_labor",
        name="Unemployment and Labor",
        amount=3089.14,
        items=[
            SpendingItem(
                id="tanf",
                description="Temporary Assistance for Needy Families",
                amount=530.51,
                tooltip="Provides temporary financial assistance, job training, and support services to low-income families with children, aimed at promoting self-sufficiency.",
                wiki_link="https://en.wikipedia.org/wiki/Temporary_Assistance_for_Needy_Families",
            ),
            SpendingItem(
                id="child_tax_credit",
                description="Child Tax Credit",
                amount=270.23,
                tooltip="A tax credit provided to eligible taxpayers for qualifying dependent children, designed to help offset the cost of raising children.",
                wiki_link="https://en.wikipedia.org/wiki/Child_tax_credit_(United_States)",
            ),
            SpendingItem(
                id="refugee_assistance",
                description="Refugee Assistance",
                amount=76.71,
                tooltip="Funding for programs supporting the resettlement, integration, and initial needs of refugees admitted to the United States.",
                wiki_link="https://en.wikipedia.org/wiki/Office_of_Refugee_Resettlement",
            ),
            SpendingItem(
                id="liheap",
                description="Low Income Home Energy Assistance Program",
                amount=49.13,
                tooltip="Helps eligible low-income households pay their heating and cooling bills, and covers energy crisis assistance and weatherization.",
                wiki_link="https://en.wikipedia.org/wiki/Low_Income_Home_Energy_Assistance_Program",
            ),
            SpendingItem(
                id="nlrb",
                description="National Labor Relations Board (NLRB)",
                amount=3.00,
                tooltip="An independent U.S. government agency enforcing federal labor law concerning collective bargaining and unfair labor practices by employers and unions.",
                wiki_link="https://en.wikipedia.org/wiki/National_Labor_Relations_Board",
            ),
        ],
    ),
    SpendingCategory(
        id="education",
        name="Education",
        amount=2382.28,
        items=[
            SpendingItem(
                id="dept_education",
                description="Department of Education",
                amount=2305.39,
                tooltip="The cabinet-level department overseeing federal education policy, programs, and funding distribution.",
                wiki_link="https://en.wikipedia.org/wiki/United_States_Department_of_Education",
            ),
            SpendingItem(
                id="college_aid",
                description="Dept. of Education - College Aid",
                amount=1220.53,
                tooltip="Includes federal financial aid programs for postsecondary education like Pell Grants, federal student loans (Direct Loans), and Work-Study.",
                wiki_link="https://en.wikipedia.org/wiki/Student_financial_aid_in_the_United_States",
            ),
            SpendingItem(
                id="k12_schools",
                description="Dept. of Education - K-12 Schools",
                amount=896.15,
                tooltip="Federal funding supporting elementary and secondary education, often targeting disadvantaged students (e.g., Title I) and students with disabilities (IDEA).",
                wiki_link="https://en.wikipedia.org/wiki/Elementary_and_Secondary_Education_Act",
            ),
            SpendingItem(
                id="cpb",
                description="Corporation for Public Broadcasting",
                amount=5.50,
                tooltip="A private, non-profit corporation created by Congress to fund public radio (NPR) and television (PBS) stations.",
                wiki_link="https://en.wikipedia.org/wiki/Corporation_for_Public_Broadcasting",
            ),
            SpendingItem(
                id="imls",
                description="Museum and Library Services",
                amount=4.20,
                tooltip="The primary source of federal support for the nation's libraries and museums, providing grants and policy leadership.",
                wiki_link="https://en.wikipedia.org/wiki/Institute_of_Museum_and_Library_Services",
            ),
        ],
    ),
    SpendingCategory(
        id="food_agriculture",
        name="Food and Agriculture",
        amount=2101.90,
        items=[
            SpendingItem(
                id="snap",
                description="Food stamps (SNAP)",
                amount=1305.30,
                tooltip="The Supplemental Nutrition Assistance Program, providing food-purchasing assistance for low- and no-income people living in the U.S.",
                wiki_link="https://en.wikipedia.org/wiki/Supplemental_Nutrition_Assistance_Program",
            ),
            SpendingItem(
                id="school_lunch",
                description="School Lunch & child nutrition",
                amount=353.78,
                tooltip="Includes the National School Lunch Program and School Breakfast Program, providing free or reduced-price meals to eligible children in schools.",
                wiki_link="https://en.wikipedia.org/wiki/National_School_Lunch_Program",
            ),
            SpendingItem(
                id="fsa",
                description="Farm Services Agency",
                amount=85.90,
                tooltip="An agency within the USDA providing loans, commodity price support, disaster assistance, and conservation programs to farmers and ranchers.",
                wiki_link="https://en.wikipedia.org/wiki/Farm_Service_Agency",
            ),
            SpendingItem(
                id="wic",
                description="Women, Infants, & Children (WIC)",
                amount=48.76,
                tooltip="A supplemental nutrition program providing nutritious foods, nutrition education, and healthcare referrals for low-income pregnant women, new mothers, infants, and children up to age five.",
                wiki_link="https://en.wikipedia.org/wiki/WIC",
            ),
        ],
    ),
    SpendingCategory(
        id="government",
        name="Government",
        amount=1906.73,
        items=[
            SpendingItem(
                id="fdic",
                description="Federal Deposit Insurance Corporation",
                amount=454.03,
                tooltip="An independent agency created by Congress to maintain stability and public confidence in the nation's financial system by insuring deposits in U.S. banks.",
                wiki_link="https://en.wikipedia.org/wiki/Federal_Deposit_Insurance_Corporation",
            ),
            SpendingItem(
                id="irs",
                description="Internal Revenue Service",
                amount=231.86,
                tooltip="The U.S. government agency responsible for tax collection and the administration of the Internal Revenue Code.",
                wiki_link="https://en.wikipedia.org/wiki/Internal_Revenue_Service",
            ),
            SpendingItem(
                id="federal_courts",
                description="Federal Court System",
                amount=90.92,
                tooltip="The judiciary branch of the U.S. federal government, including district courts, courts of appeals, and the Supreme Court.",
                wiki_link="https://en.wikipedia.org/wiki/Federal_judiciary_of_the_United_States",
            ),
            SpendingItem(
                id="public_defenders",
                description="Federal Court System - Public Defenders",
                amount=12.91,
                tooltip="Attorneys appointed and funded by the federal government to represent defendants in federal criminal cases who cannot afford to hire their own lawyer.",
                wiki_link="https://en.wikipedia.org/wiki/Federal_Public_Defender",
            ),
            SpendingItem(
                id="usps",
                description="Postal Service",
                amount=11.53,
                tooltip="An independent agency of the executive branch responsible for providing postal service in the U.S. (Note: Primarily funded by postage revenue, but receives some federal appropriations).",
                wiki_link="https://en.wikipedia.org/wiki/United_States_Postal_Service",
            ),
            SpendingItem(
                id="cfpb",
                description="Consumer Financial Protection Bureau (CFPB)",
                amount=8.58,
                tooltip="A regulatory agency charged with overseeing financial products and services offered to consumers.",
                wiki_link="https://en.wikipedia.org/wiki/Consumer_Financial_Protection_Bureau",
            ),
            SpendingItem(
                id="mbda",
                description="Minority Business Development Agency",
                amount=1.21,
                tooltip="An agency within the Department of Commerce dedicated to promoting the growth and competitiveness of minority-owned businesses.",
                wiki_link="https://en.wikipedia.org/wiki/Minority_Business_Development_Agency",
            ),
            SpendingItem(
                id="usich",
                description="Interagency Council on Homelessness",
                amount=0.04,
                tooltip="Coordinates the federal response to homelessness across 19 federal agencies.",
                wiki_link="https://en.wikipedia.org/wiki/United_States_Interagency_Council_on_Homelessness",
            ),
        ],
    ),
    SpendingCategory(
        id="housing_community",
        name="Housing and Community",
        amount=1792.12,
        items=[
            SpendingItem(
                id="fema",
                description="Federal Emergency Management Agency",
                amount=635.39,
                tooltip="An agency within the Department of Homeland Security coordinating the federal government's response to disasters.",
                wiki_link="https://en.wikipedia.org/wiki/Federal_Emergency_Management_Agency",
            ),
            SpendingItem(
                id="fema_drf",
                description="FEMA - Disaster Relief Fund",
                amount=553.28,
                tooltip="The primary source of funding for federal disaster response, recovery, and mitigation efforts managed by FEMA.",
                wiki_link="https://en.wikipedia.org/wiki/Disaster_Relief_Fund",
            ),
            SpendingItem(
                id="hud",
                description="Dept. of Housing and Urban Development",
                amount=525.67,
                tooltip="The cabinet department responsible for national housing policy, community development, and affordable housing programs.",
                wiki_link="https://en.wikipedia.org/wiki/United_States_Department_of_Housing_and_Urban_Development",
            ),
            SpendingItem(
                id="head_start",
                description="Head Start",
                amount=112.87,
                tooltip="A program providing comprehensive early childhood education, health, nutrition, and parent involvement services to low-income children and families.",
                wiki_link="https://en.wikipedia.org/wiki/Head_Start_Program",
            ),
            SpendingItem(
                id="public_housing",
                description="Public Housing",
                amount=71.97,
                tooltip="Affordable rental housing programs funded by HUD for eligible low-income families, the elderly, and persons with disabilities.",
                wiki_link="https://en.wikipedia.org/wiki/Public_housing_in_the_United_States",
            ),
        ],
    ),
    SpendingCategory(
        id="energy_environment",
        name="Energy and Environment",
        amount=1103.55,
        items=[
            SpendingItem(
                id="epa",
                description="Environmental Protection Agency",
                amount=373.06,
                tooltip="An agency responsible for creating and enforcing regulations based on laws passed by Congress to protect human health and the environment.",
                wiki_link="https://en.wikipedia.org/wiki/United_States_Environmental_Protection_Agency",
            ),
            SpendingItem(
                id="forest_service",
                description="Forest Service",
                amount=115.03,
                tooltip="An agency within the USDA that administers the nation's 154 national forests and 20 national grasslands.",
                wiki_link="https://en.wikipedia.org/wiki/United_States_Forest_Service",
            ),
            SpendingItem(
                id="noaa",
                description="Nat'l Oceanic & Atmospheric Administration (NOAA)",
                amount=73.37,
                tooltip="A scientific agency within the Department of Commerce focusing on the conditions of the oceans, major waterways, and the atmosphere.",
                wiki_link="https://en.wikipedia.org/wiki/National_Oceanic_and_Atmospheric_Administration",
            ),
            SpendingItem(
                id="renewable_energy",
                description="Energy efficiency and renewable energy",
                amount=73.36,
                tooltip="Funding for programs within the Department of Energy promoting energy efficiency improvements and the development/deployment of renewable energy technologies.",
                wiki_link="https://en.wikipedia.org/wiki/Office_of_Energy_Efficiency_and_Renewable_Energy",
            ),
            SpendingItem(
                id="nps",
                description="National Park Service",
                amount=41.60,
                tooltip="An agency within the Department of the Interior managing all national parks, many national monuments, and other conservation and historical properties.",
                wiki_link="https://en.wikipedia.org/wiki/National_Park_Service",
            ),
        ],
    ),
    SpendingCategory(
        id="international_affairs",
        name="International Affairs",
        amount=681.73,
        items=[
            SpendingItem(
                id="diplomacy",
                description="Diplomacy",
                amount=151.70,
                tooltip="Funding for the Department of State, including U.S. embassies, consulates, and diplomatic personnel abroad.",
                wiki_link="https://en.wikipedia.org/wiki/United_States_Department_of_State",
            ),
            SpendingItem(
                id="usaid",
                description="U.S. Agency for International Development (USAID)",
                amount=115.34,
                tooltip="The lead U.S. government agency primarily responsible for administering civilian foreign aid and development assistance.",
                wiki_link="https://en.wikipedia.org/wiki/United_States_Agency_for_International_Development",
            ),
            SpendingItem(
                id="usaid_climate",
                description="USAID - Climate Aid",
                amount=8.77,
                tooltip="Specific funding within USAID dedicated to helping other countries mitigate and adapt to the impacts of climate change.",
                wiki_link="https://www.usaid.gov/climate",
            ),
        ],
    ),
    SpendingCategory(
        id="law_enforcement",
        name="Law Enforcement",
        amount=668.42,
        items=[
            SpendingItem(
                id="deportations_border",
                description="Deportations & border patrol",
                amount=287.64,
                tooltip="Funding primarily for Immigration and Customs Enforcement (ICE) for interior enforcement/deportations and Customs and Border Protection (CBP) for border security.",
                wiki_link="https://en.wikipedia.org/wiki/U.S._Immigration_and_Customs_Enforcement",
            ),
            SpendingItem(
                id="federal_prisons",
                description="Federal Prisons",
                amount=83.29,
                tooltip="Funding for the Bureau of Prisons, responsible for the custody and care of federal inmates.",
                wiki_link="https://en.wikipedia.org/wiki/Federal_Bureau_of_Prisons",
            ),
        ],
    ),
    SpendingCategory(
        id="transportation",
        name="Transportation",
        amount=578.94,
        items=[
            SpendingItem(
                id="highways",
                description="Highways",
                amount=111.66,
                tooltip="Funding distributed to states via the Federal Highway Administration (FHWA) for the construction, maintenance, and repair of the federal-aid highway system.",
                wiki_link="https://en.wikipedia.org/wiki/Federal_Highway_Administration",
            ),
            SpendingItem(
                id="public_transit",
                description="Public transit",
                amount=87.29,
                tooltip="Federal funding provided through the Federal Transit Administration (FTA) to support public transportation systems like buses, subways, and light rail.",
                wiki_link="https://en.wikipedia.org/wiki/Federal_Transit_Administration",
            ),
            SpendingItem(
                id="tsa",
                description="Transportation Security Administration (TSA)",
                amount=68.68,
                tooltip="An agency within the Department of Homeland Security responsible for security of the traveling public, primarily focusing on aviation security.",
                wiki_link="https://en.wikipedia.org/wiki/Transportation_Security_Administration",
            ),
            SpendingItem(
                id="faa",
                description="Federal Aviation Administration",
                amount=68.38,
                tooltip="An agency within the Department of Transportation responsible for regulating all aspects of civil aviation in the U.S.",
                wiki_link="https://en.wikipedia.org/wiki/Federal_Aviation_Administration",
            ),
            SpendingItem(
                id="amtrak",
                description="Amtrak & Rail Service",
                amount=40.28,
                tooltip="Federal funding supporting Amtrak, the national passenger railroad corporation, and potentially other rail initiatives.",
                wiki_link="https://en.wikipedia.org/wiki/Amtrak",
            ),
        ],
    ),
    SpendingCategory(
        id="science",
        name="Science",
        amount=411.82,
        items=[
            SpendingItem(
                id="nasa",
                description="National Aeronautics & Space Administration (NASA)",
                amount=225.57,
                tooltip="An independent agency responsible for the U.S. civilian space program, as well as aeronautics and aerospace research.",
                wiki_link="https://en.wikipedia.org/wiki/NASA",
            ),
            SpendingItem(
                id="nsf",
                description="National Science Foundation",
                amount=96.62,
                tooltip="An independent federal agency supporting fundamental research and education in all non-medical fields of science and engineering.",
                wiki_link="https://en.wikipedia.org/wiki/National_Science_Foundation",
            ),
            SpendingItem(
                id="nasa_spacex",
                description="NASA - SpaceX Contracts",
                amount=14.95,
                tooltip="Contracts awarded by NASA to SpaceX for commercial cargo resupply, crew transportation to the ISS, and lunar landing systems (Artemis).",
                wiki_link="https://en.wikipedia.org/wiki/SpaceX#NASA_contracts",
            ),
        ],
    ),
]


def get_tax_spending(location: Optional[str] = None, tax_amount: Optional[float] = None) -> list[SpendingCategory]:
    """Return the spending breakdown, largest category first.

    Args:
        location: Accepted for interface compatibility; the data is national.
        tax_amount: Accepted for interface compatibility; percentages are fixed.

    Returns:
        List of SpendingCategory sorted by percentage, descending
    """
    if location or tax_amount:
        logger.debug(f"Static spending data ignores location={location!r} tax_amount={tax_amount!r}")
    return sorted(SPENDING_CATEGORIES, key=lambda c: c.percentage, reverse=True)


def find_item(item_id: str) -> Optional[tuple[SpendingCategory, SpendingItem]]:
    """Look up a line item by id, returning its category alongside it."""
    for category in SPENDING_CATEGORIES:
        for item in category.items:
            if item.id == item_id:
                return category, item
    return None


def dollars_for(item: SpendingItem, tax_amount: float) -> float:
    """Dollars of a given tax payment that go to one line item."""
    return round(item.amount_per_dollar * tax_amount, 2)
