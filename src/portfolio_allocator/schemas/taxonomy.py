"""
Category Taxonomy — Closed Enumerations & Static Lookups

The four dimensions a constraint can target (region, sector, size, style),
their label sets, and the static tables that derive an instrument's region
from its country and its sector from its industry.

Sectors, industry groups and industries follow the Morningstar Global Equity
Classification Structure. Regions follow Morningstar's equity regions.
"""

from __future__ import annotations

from enum import Enum
from typing import Union

from portfolio_allocator.exceptions import UnknownCategoryError


# ---------------------------------------------------------------------------
# Dimensions & Labels
# ---------------------------------------------------------------------------

class Dimension(str, Enum):
    REGION = "region"
    SECTOR = "sector"
    SIZE = "size"
    STYLE = "style"


class Region(str, Enum):
    NORTH_AMERICA = "NorthAmerica"
    LATIN_AMERICA = "LatinAmerica"
    UNITED_KINGDOM = "UnitedKingdom"
    EUROZONE = "Eurozone"
    EUROPE_DEVELOPED = "EuropeDeveloped"
    EUROPE_EMERGING = "EuropeEmerging"
    AFRICA_ME = "AfricaME"
    JAPAN = "Japan"
    AUSTRALASIA = "Australasia"
    ASIA_DEVELOPED = "AsiaDeveloped"
    ASIA_EMERGING = "AsiaEmerging"


class Sector(str, Enum):
    BASIC_MATERIALS = "BasicMaterials"
    CONSUMER_CYCLICAL = "ConsumerCyclical"
    FINANCIAL_SERVICES = "FinancialServices"
    REAL_ESTATE = "RealEstate"
    CONSUMER_DEFENSIVE = "ConsumerDefensive"
    HEALTHCARE = "Healthcare"
    UTILITIES = "Utilities"
    COMMUNICATION_SERVICES = "CommunicationServices"
    ENERGY = "Energy"
    INDUSTRIALS = "Industrials"
    TECHNOLOGY = "Technology"


class Size(str, Enum):
    SMALL = "Small"
    MID = "Mid"
    LARGE = "Large"


class Style(str, Enum):
    VALUE = "Value"
    BLEND = "Blend"
    GROWTH = "Growth"


CategoryLabel = Union[Region, Sector, Size, Style]

LABEL_TYPES: dict[Dimension, type[Enum]] = {
    Dimension.REGION: Region,
    Dimension.SECTOR: Sector,
    Dimension.SIZE: Size,
    Dimension.STYLE: Style,
}


# ---------------------------------------------------------------------------
# Industry Classification
# ---------------------------------------------------------------------------

class IndustryGroup(str, Enum):
    AGRICULTURE = "Agriculture"
    BUILDING_MATERIALS = "BuildingMaterials"
    CHEMICALS = "Chemicals"
    FOREST_PRODUCTS = "ForestProducts"
    METALS_MINING = "MetalsMining"
    STEEL = "Steel"
    VEHICLES_PARTS = "VehiclesParts"
    FURNISHINGS_FIXTURES_APPLIANCES = "FurnishingsFixturesAppliances"
    HOMEBUILDING_CONSTRUCTION = "HomebuildingConstruction"
    MANUFACTURING_APPAREL_ACCESSORIES = "ManufacturingApparelAccessories"
    PACKAGING_CONTAINERS = "PackagingContainers"
    PERSONAL_SERVICES = "PersonalServices"
    RESTAURANTS = "Restaurants"
    RETAIL_CYCLICAL = "RetailCyclical"
    TRAVEL_LEISURE = "TravelLeisure"
    ASSET_MANAGEMENT = "AssetManagement"
    BANKS = "Banks"
    CAPITAL_MARKETS = "CapitalMarkets"
    INSURANCE = "Insurance"
    DIVERSIFIED_FINANCIAL_SERVICES = "DiversifiedFinancialServices"
    CREDIT_SERVICES = "CreditServices"
    REAL_ESTATE = "RealEstate"
    REITS = "REITs"
    BEVERAGES_ALCOHOLIC = "BeveragesAlcoholic"
    BEVERAGES_NON_ALCOHOLIC = "BeveragesNonAlcoholic"
    CONSUMER_PACKAGED_GOODS = "ConsumerPackagedGoods"
    EDUCATION = "Education"
    RETAIL_DEFENSIVE = "RetailDefensive"
    TOBACCO_PRODUCTS = "TobaccoProducts"
    BIOTECHNOLOGY = "Biotechnology"
    DRUG_MANUFACTURERS = "DrugManufacturers"
    HEALTHCARE_PLANS = "HealthcarePlans"
    HEALTHCARE_PROVIDERS_SERVICES = "HealthcareProvidersServices"
    MEDICAL_DEVICES_INSTRUMENTS = "MedicalDevicesInstruments"
    MEDICAL_DIAGNOSTICS_RESEARCH = "MedicalDiagnosticsResearch"
    MEDICAL_DISTRIBUTION = "MedicalDistribution"
    UTILITIES_INDEPENDENT_POWER_PRODUCERS = "UtilitiesIndependentPowerProducers"
    UTILITIES_REGULATED = "UtilitiesRegulated"
    TELECOMMUNICATION_SERVICES = "TelecommunicationServices"
    MEDIA_DIVERSIFIED = "MediaDiversified"
    INTERACTIVE_MEDIA = "InteractiveMedia"
    OIL_GAS = "OilGas"
    OTHER_ENERGY_SOURCES = "OtherEnergySources"
    AEROSPACE_DEFENSE = "AerospaceDefense"
    BUSINESS_SERVICES = "BusinessServices"
    CONGLOMERATES = "Conglomerates"
    CONSTRUCTION = "Construction"
    FARM_HEAVY_CONSTRUCTION_MACHINERY = "FarmHeavyConstructionMachinery"
    INDUSTRIAL_DISTRIBUTION = "IndustrialDistribution"
    INDUSTRIAL_PRODUCTS = "IndustrialProducts"
    TRANSPORTATION = "Transportation"
    WASTE_MANAGEMENT = "WasteManagement"
    SOFTWARE = "Software"
    HARDWARE = "Hardware"
    SEMICONDUCTORS = "Semiconductors"


class Industry(str, Enum):
    AGRICULTURAL_INPUTS = "AgriculturalInputs"
    BUILDING_MATERIALS = "BuildingMaterials"
    CHEMICALS = "Chemicals"
    SPECIALTY_CHEMICALS = "SpecialtyChemicals"
    LUMBER_WOOD_PRODUCTION = "LumberWoodProduction"
    PAPER_PAPER_PRODUCTS = "PaperPaperProducts"
    ALUMINUM = "Aluminum"
    COPPER = "Copper"
    OTHER_INDUSTRIAL_METALS_MINING = "OtherIndustrialMetalsMining"
    GOLD = "Gold"
    SILVER = "Silver"
    OTHER_PRECIOUS_METALS_MINING = "OtherPreciousMetalsMining"
    COKING_COAL = "CokingCoal"
    STEEL = "Steel"
    AUTO_TRUCK_DEALERSHIPS = "AutoTruckDealerships"
    AUTO_MANUFACTURERS = "AutoManufacturers"
    AUTO_PARTS = "AutoParts"
    RECREATIONAL_VEHICLES = "RecreationalVehicles"
    FURNISHINGS_FIXTURES_APPLIANCES = "FurnishingsFixturesAppliances"
    RESIDENTIAL_CONSTRUCTION = "ResidentialConstruction"
    TEXTILE_MANUFACTURING = "TextileManufacturing"
    APPAREL_MANUFACTURING = "ApparelManufacturing"
    FOOTWEAR_ACCESSORIES = "FootwearAccessories"
    PACKAGING_CONTAINERS = "PackagingContainers"
    PERSONAL_SERVICES = "PersonalServices"
    RESTAURANTS = "Restaurants"
    APPAREL_RETAIL = "ApparelRetail"
    DEPARTMENT_STORES = "DepartmentStores"
    HOME_IMPROVEMENT_RETAIL = "HomeImprovementRetail"
    LUXURY_GOODS = "LuxuryGoods"
    INTERNET_RETAIL = "InternetRetail"
    SPECIALTY_RETAIL = "SpecialtyRetail"
    GAMBLING = "Gambling"
    LEISURE = "Leisure"
    LODGING = "Lodging"
    RESORTS_CASINOS = "ResortsCasinos"
    TRAVEL_SERVICES = "TravelServices"
    ASSET_MANAGEMENT = "AssetManagement"
    BANKS_DIVERSIFIED = "BanksDiversified"
    BANKS_REGIONAL = "BanksRegional"
    MORTGAGE_FINANCE = "MortgageFinance"
    CAPITAL_MARKETS = "CapitalMarkets"
    FINANCIAL_DATA_STOCK_EXCHANGES = "FinancialDataStockExchanges"
    INSURANCE_LIFE = "InsuranceLife"
    INSURANCE_PROPERTY_CASUALTY = "InsurancePropertyCasualty"
    INSURANCE_REINSURANCE = "InsuranceReinsurance"
    INSURANCE_SPECIALTY = "InsuranceSpecialty"
    INSURANCE_BROKERS = "InsuranceBrokers"
    INSURANCE_DIVERSIFIED = "InsuranceDiversified"
    SHELL_COMPANIES = "ShellCompanies"
    FINANCIAL_CONGLOMERATES = "FinancialConglomerates"
    CREDIT_SERVICES = "CreditServices"
    REAL_ESTATE_DEVELOPMENT = "RealEstateDevelopment"
    REAL_ESTATE_SERVICES = "RealEstateServices"
    REAL_ESTATE_DIVERSIFIED = "RealEstateDiversified"
    REIT_HEALTHCARE_FACILITIES = "REITHealthcareFacilities"
    REIT_HOTEL_MOTEL = "REITHotelMotel"
    REIT_INDUSTRIAL = "REITIndustrial"
    REIT_OFFICE = "REITOffice"
    REIT_RESIDENTIAL = "REITResidential"
    REIT_RETAIL = "REITRetail"
    REIT_MORTGAGE = "REITMortgage"
    REIT_SPECIALTY = "REITSpecialty"
    REIT_DIVERSIFIED = "REITDiversified"
    BEVERAGES_BREWERS = "BeveragesBrewers"
    BEVERAGES_WINERIES_DISTILLERIES = "BeveragesWineriesDistilleries"
    BEVERAGES_NON_ALCOHOLIC = "BeveragesNonAlcoholic"
    CONFECTIONERS = "Confectioners"
    FARM_PRODUCTS = "FarmProducts"
    HOUSEHOLD_PERSONAL_PRODUCTS = "HouseholdPersonalProducts"
    PACKAGED_FOODS = "PackagedFoods"
    EDUCATION_TRAINING_SERVICES = "EducationTrainingServices"
    DISCOUNT_STORES = "DiscountStores"
    FOOD_DISTRIBUTION = "FoodDistribution"
    GROCERY_STORES = "GroceryStores"
    TOBACCO = "Tobacco"
    BIOTECHNOLOGY = "Biotechnology"
    DRUG_MANUFACTURERS_GENERAL = "DrugManufacturersGeneral"
    DRUG_MANUFACTURERS_SPECIALTY_GENERIC = "DrugManufacturersSpecialtyGeneric"
    HEALTHCARE_PLANS = "HealthcarePlans"
    MEDICAL_CARE_FACILITIES = "MedicalCareFacilities"
    PHARMACEUTICAL_RETAILERS = "PharmaceuticalRetailers"
    HEALTH_INFORMATION_SERVICES = "HealthInformationServices"
    MEDICAL_DEVICES = "MedicalDevices"
    MEDICAL_INSTRUMENTS_SUPPLIES = "MedicalInstrumentsSupplies"
    DIAGNOSTICS_RESEARCH = "DiagnosticsResearch"
    MEDICAL_DISTRIBUTION = "MedicalDistribution"
    UTILITIES_INDEPENDENT_POWER_PRODUCERS = "UtilitiesIndependentPowerProducers"
    UTILITIES_RENEWABLE = "UtilitiesRenewable"
    UTILITIES_REGULATED_WATER = "UtilitiesRegulatedWater"
    UTILITIES_REGULATED_ELECTRIC = "UtilitiesRegulatedElectric"
    UTILITIES_REGULATED_GAS = "UtilitiesRegulatedGas"
    UTILITIES_DIVERSIFIED = "UtilitiesDiversified"
    TELECOM_SERVICES = "TelecomServices"
    ADVERTISING_AGENCIES = "AdvertisingAgencies"
    PUBLISHING = "Publishing"
    BROADCASTING = "Broadcasting"
    ENTERTAINMENT = "Entertainment"
    INTERNET_CONTENT_INFORMATION = "InternetContentInformation"
    ELECTRONIC_GAMING_MULTIMEDIA = "ElectronicGamingMultimedia"
    OIL_GAS_DRILLING = "OilGasDrilling"
    OIL_GAS_EP = "OilGasEP"
    OIL_GAS_INTEGRATED = "OilGasIntegrated"
    OIL_GAS_MIDSTREAM = "OilGasMidstream"
    OIL_GAS_REFINING_MARKETING = "OilGasRefiningMarketing"
    OIL_GAS_EQUIPMENT_SERVICES = "OilGasEquipmentServices"
    THERMAL_COAL = "ThermalCoal"
    URANIUM = "Uranium"
    AEROSPACE_DEFENSE = "AerospaceDefense"
    SPECIALTY_BUSINESS_SERVICES = "SpecialtyBusinessServices"
    CONSULTING_SERVICES = "ConsultingServices"
    RENTAL_LEASING_SERVICES = "RentalLeasingServices"
    SECURITY_PROTECTION_SERVICES = "SecurityProtectionServices"
    STAFFING_EMPLOYMENT_SERVICES = "StaffingEmploymentServices"
    CONGLOMERATES = "Conglomerates"
    ENGINEERING_CONSTRUCTION = "EngineeringConstruction"
    INFRASTRUCTURE_OPERATIONS = "InfrastructureOperations"
    BUILDING_PRODUCTS_EQUIPMENT = "BuildingProductsEquipment"
    FARM_HEAVY_CONSTRUCTION_MACHINERY = "FarmHeavyConstructionMachinery"
    INDUSTRIAL_DISTRIBUTION = "IndustrialDistribution"
    BUSINESS_EQUIPMENT_SUPPLIES = "BusinessEquipmentSupplies"
    SPECIALTY_INDUSTRIAL_MACHINERY = "SpecialtyIndustrialMachinery"
    METAL_FABRICATION = "MetalFabrication"
    POLLUTION_TREATMENT_CONTROLS = "PollutionTreatmentControls"
    TOOLS_ACCESSORIES = "ToolsAccessories"
    ELECTRICAL_EQUIPMENT_PARTS = "ElectricalEquipmentParts"
    AIRPORTS_AIR_SERVICES = "AirportsAirServices"
    AIRLINES = "Airlines"
    RAILROADS = "Railroads"
    MARINE_SHIPPING = "MarineShipping"
    TRUCKING = "Trucking"
    INTEGRATED_FREIGHT_LOGISTICS = "IntegratedFreightLogistics"
    WASTE_MANAGEMENT = "WasteManagement"
    INFORMATION_TECHNOLOGY_SERVICES = "InformationTechnologyServices"
    SOFTWARE_APPLICATION = "SoftwareApplication"
    SOFTWARE_INFRASTRUCTURE = "SoftwareInfrastructure"
    COMMUNICATION_EQUIPMENT = "CommunicationEquipment"
    COMPUTER_HARDWARE = "ComputerHardware"
    CONSUMER_ELECTRONICS = "ConsumerElectronics"
    ELECTRONIC_COMPONENTS = "ElectronicComponents"
    ELECTRONICS_COMPUTER_DISTRIBUTION = "ElectronicsComputerDistribution"
    SCIENTIFIC_TECHNICAL_INSTRUMENTS = "ScientificTechnicalInstruments"
    SEMICONDUCTOR_EQUIPMENT_MATERIALS = "SemiconductorEquipmentMaterials"
    SEMICONDUCTORS = "Semiconductors"
    SOLAR = "Solar"


# ---------------------------------------------------------------------------
# Static Lookups
# ---------------------------------------------------------------------------

# ISO 3166-1 alpha-2 country codes per region
COUNTRIES_BY_REGION: dict[Region, tuple[str, ...]] = {
    Region.NORTH_AMERICA: ("US", "CA", "PM", "UM"),
    Region.LATIN_AMERICA: (
        "AI", "AG", "AR", "AW", "BS", "BB", "BZ", "BM", "BO", "BQ", "BR", "VG",
        "KY", "CL", "CO", "CR", "CU", "CW", "DM", "DO", "EC", "SV", "FK", "GF",
        "GD", "GP", "GT", "GY", "HT", "HN", "JM", "MQ", "MX", "MS", "NI", "PA",
        "PY", "PE", "PR", "BL", "KN", "LC", "MF", "VC", "SX", "GS", "SR", "TT",
        "TC", "UY", "VI", "VE",
    ),
    Region.UNITED_KINGDOM: ("GB", "IM"),
    Region.EUROZONE: (
        "AT", "AX", "BE", "CY", "EE", "FI", "FR", "DE", "GR", "IE", "IT", "LV",
        "LT", "LU", "MT", "NL", "PT", "SK", "SI", "ES",
    ),
    Region.EUROPE_DEVELOPED: (
        "AD", "DK", "FO", "GI", "GL", "GG", "IS", "JE", "LI", "MC", "NO", "SM",
        "SJ", "SE", "CH", "VA",
    ),
    Region.EUROPE_EMERGING: (
        "AL", "BY", "BA", "BG", "HR", "CZ", "HU", "MK", "MD", "PL", "RO", "RU",
        "RS", "ME", "TR", "UA",
    ),
    Region.AFRICA_ME: (
        "DZ", "AO", "BH", "BJ", "BW", "BV", "BF", "BI", "CM", "CV", "CF", "TD",
        "KM", "CG", "CD", "CI", "DJ", "EG", "TF", "GQ", "ER", "ET", "GA", "GM",
        "GH", "GN", "GW", "IR", "IQ", "IL", "JO", "KE", "KW", "LB", "LS", "LR",
        "LY", "MG", "MW", "ML", "MR", "MU", "YT", "MA", "MZ", "NA", "NE", "NG",
        "OM", "QA", "RE", "RW", "ST", "SA", "SN", "SC", "SL", "SO", "ZA", "SS",
        "SD", "SH", "SZ", "SY", "TZ", "TG", "TN", "UG", "AE", "PS", "EH", "YE",
        "ZM", "ZW",
    ),
    Region.JAPAN: ("JP",),
    Region.AUSTRALASIA: ("AU", "NZ"),
    Region.ASIA_DEVELOPED: ("BN", "PF", "GU", "HK", "MO", "NC", "SG", "KR", "TW", "IO"),
    Region.ASIA_EMERGING: (
        "AF", "AS", "AM", "AZ", "BD", "BT", "MM", "KH", "CN", "CX", "CC", "CK",
        "TL", "FJ", "GE", "HM", "IN", "ID", "KZ", "KI", "KG", "LA", "MY", "MV",
        "MH", "FM", "MN", "NR", "NP", "NU", "NF", "KP", "MP", "PK", "PW", "PG",
        "PH", "PN", "WS", "SB", "LK", "TJ", "TH", "TK", "TO", "TM", "TV", "UZ",
        "VU", "VN", "WF",
    ),
}

_I = Industry
INDUSTRIES_BY_GROUP: dict[IndustryGroup, tuple[Industry, ...]] = {
    IndustryGroup.AGRICULTURE: (_I.AGRICULTURAL_INPUTS,),
    IndustryGroup.BUILDING_MATERIALS: (_I.BUILDING_MATERIALS,),
    IndustryGroup.CHEMICALS: (_I.CHEMICALS, _I.SPECIALTY_CHEMICALS),
    IndustryGroup.FOREST_PRODUCTS: (_I.LUMBER_WOOD_PRODUCTION, _I.PAPER_PAPER_PRODUCTS),
    IndustryGroup.METALS_MINING: (
        _I.ALUMINUM, _I.COPPER, _I.OTHER_INDUSTRIAL_METALS_MINING,
        _I.GOLD, _I.SILVER, _I.OTHER_PRECIOUS_METALS_MINING,
    ),
    IndustryGroup.STEEL: (_I.COKING_COAL, _I.STEEL),
    IndustryGroup.VEHICLES_PARTS: (
        _I.AUTO_TRUCK_DEALERSHIPS, _I.AUTO_MANUFACTURERS,
        _I.AUTO_PARTS, _I.RECREATIONAL_VEHICLES,
    ),
    IndustryGroup.FURNISHINGS_FIXTURES_APPLIANCES: (_I.FURNISHINGS_FIXTURES_APPLIANCES,),
    IndustryGroup.HOMEBUILDING_CONSTRUCTION: (_I.RESIDENTIAL_CONSTRUCTION,),
    IndustryGroup.MANUFACTURING_APPAREL_ACCESSORIES: (
        _I.TEXTILE_MANUFACTURING, _I.APPAREL_MANUFACTURING, _I.FOOTWEAR_ACCESSORIES,
    ),
    IndustryGroup.PACKAGING_CONTAINERS: (_I.PACKAGING_CONTAINERS,),
    IndustryGroup.PERSONAL_SERVICES: (_I.PERSONAL_SERVICES,),
    IndustryGroup.RESTAURANTS: (_I.RESTAURANTS,),
    IndustryGroup.RETAIL_CYCLICAL: (
        _I.APPAREL_RETAIL, _I.DEPARTMENT_STORES, _I.HOME_IMPROVEMENT_RETAIL,
        _I.LUXURY_GOODS, _I.INTERNET_RETAIL, _I.SPECIALTY_RETAIL,
    ),
    IndustryGroup.TRAVEL_LEISURE: (
        _I.GAMBLING, _I.LEISURE, _I.LODGING, _I.RESORTS_CASINOS, _I.TRAVEL_SERVICES,
    ),
    IndustryGroup.ASSET_MANAGEMENT: (_I.ASSET_MANAGEMENT,),
    IndustryGroup.BANKS: (_I.BANKS_DIVERSIFIED, _I.BANKS_REGIONAL, _I.MORTGAGE_FINANCE),
    IndustryGroup.CAPITAL_MARKETS: (_I.CAPITAL_MARKETS, _I.FINANCIAL_DATA_STOCK_EXCHANGES),
    IndustryGroup.INSURANCE: (
        _I.INSURANCE_LIFE, _I.INSURANCE_PROPERTY_CASUALTY, _I.INSURANCE_REINSURANCE,
        _I.INSURANCE_SPECIALTY, _I.INSURANCE_BROKERS, _I.INSURANCE_DIVERSIFIED,
    ),
    IndustryGroup.DIVERSIFIED_FINANCIAL_SERVICES: (_I.SHELL_COMPANIES, _I.FINANCIAL_CONGLOMERATES),
    IndustryGroup.CREDIT_SERVICES: (_I.CREDIT_SERVICES,),
    IndustryGroup.REAL_ESTATE: (
        _I.REAL_ESTATE_DEVELOPMENT, _I.REAL_ESTATE_SERVICES, _I.REAL_ESTATE_DIVERSIFIED,
    ),
    IndustryGroup.REITS: (
        _I.REIT_HEALTHCARE_FACILITIES, _I.REIT_HOTEL_MOTEL, _I.REIT_INDUSTRIAL,
        _I.REIT_OFFICE, _I.REIT_RESIDENTIAL, _I.REIT_RETAIL, _I.REIT_MORTGAGE,
        _I.REIT_SPECIALTY, _I.REIT_DIVERSIFIED,
    ),
    IndustryGroup.BEVERAGES_ALCOHOLIC: (_I.BEVERAGES_BREWERS, _I.BEVERAGES_WINERIES_DISTILLERIES),
    IndustryGroup.BEVERAGES_NON_ALCOHOLIC: (_I.BEVERAGES_NON_ALCOHOLIC,),
    IndustryGroup.CONSUMER_PACKAGED_GOODS: (
        _I.CONFECTIONERS, _I.FARM_PRODUCTS, _I.HOUSEHOLD_PERSONAL_PRODUCTS, _I.PACKAGED_FOODS,
    ),
    IndustryGroup.EDUCATION: (_I.EDUCATION_TRAINING_SERVICES,),
    IndustryGroup.RETAIL_DEFENSIVE: (_I.DISCOUNT_STORES, _I.FOOD_DISTRIBUTION, _I.GROCERY_STORES),
    IndustryGroup.TOBACCO_PRODUCTS: (_I.TOBACCO,),
    IndustryGroup.BIOTECHNOLOGY: (_I.BIOTECHNOLOGY,),
    IndustryGroup.DRUG_MANUFACTURERS: (
        _I.DRUG_MANUFACTURERS_GENERAL, _I.DRUG_MANUFACTURERS_SPECIALTY_GENERIC,
    ),
    IndustryGroup.HEALTHCARE_PLANS: (_I.HEALTHCARE_PLANS,),
    IndustryGroup.HEALTHCARE_PROVIDERS_SERVICES: (
        _I.MEDICAL_CARE_FACILITIES, _I.PHARMACEUTICAL_RETAILERS, _I.HEALTH_INFORMATION_SERVICES,
    ),
    IndustryGroup.MEDICAL_DEVICES_INSTRUMENTS: (_I.MEDICAL_DEVICES, _I.MEDICAL_INSTRUMENTS_SUPPLIES),
    IndustryGroup.MEDICAL_DIAGNOSTICS_RESEARCH: (_I.DIAGNOSTICS_RESEARCH,),
    IndustryGroup.MEDICAL_DISTRIBUTION: (_I.MEDICAL_DISTRIBUTION,),
    IndustryGroup.UTILITIES_INDEPENDENT_POWER_PRODUCERS: (
        _I.UTILITIES_INDEPENDENT_POWER_PRODUCERS, _I.UTILITIES_RENEWABLE,
    ),
    IndustryGroup.UTILITIES_REGULATED: (
        _I.UTILITIES_REGULATED_WATER, _I.UTILITIES_REGULATED_ELECTRIC,
        _I.UTILITIES_REGULATED_GAS, _I.UTILITIES_DIVERSIFIED,
    ),
    IndustryGroup.TELECOMMUNICATION_SERVICES: (_I.TELECOM_SERVICES,),
    IndustryGroup.MEDIA_DIVERSIFIED: (
        _I.ADVERTISING_AGENCIES, _I.PUBLISHING, _I.BROADCASTING, _I.ENTERTAINMENT,
    ),
    IndustryGroup.INTERACTIVE_MEDIA: (
        _I.INTERNET_CONTENT_INFORMATION, _I.ELECTRONIC_GAMING_MULTIMEDIA,
    ),
    IndustryGroup.OIL_GAS: (
        _I.OIL_GAS_DRILLING, _I.OIL_GAS_EP, _I.OIL_GAS_INTEGRATED,
        _I.OIL_GAS_MIDSTREAM, _I.OIL_GAS_REFINING_MARKETING, _I.OIL_GAS_EQUIPMENT_SERVICES,
    ),
    IndustryGroup.OTHER_ENERGY_SOURCES: (_I.THERMAL_COAL, _I.URANIUM),
    IndustryGroup.AEROSPACE_DEFENSE: (_I.AEROSPACE_DEFENSE,),
    IndustryGroup.BUSINESS_SERVICES: (
        _I.SPECIALTY_BUSINESS_SERVICES, _I.CONSULTING_SERVICES, _I.RENTAL_LEASING_SERVICES,
        _I.SECURITY_PROTECTION_SERVICES, _I.STAFFING_EMPLOYMENT_SERVICES,
    ),
    IndustryGroup.CONGLOMERATES: (_I.CONGLOMERATES,),
    IndustryGroup.CONSTRUCTION: (
        _I.ENGINEERING_CONSTRUCTION, _I.INFRASTRUCTURE_OPERATIONS, _I.BUILDING_PRODUCTS_EQUIPMENT,
    ),
    IndustryGroup.FARM_HEAVY_CONSTRUCTION_MACHINERY: (_I.FARM_HEAVY_CONSTRUCTION_MACHINERY,),
    IndustryGroup.INDUSTRIAL_DISTRIBUTION: (_I.INDUSTRIAL_DISTRIBUTION,),
    IndustryGroup.INDUSTRIAL_PRODUCTS: (
        _I.BUSINESS_EQUIPMENT_SUPPLIES, _I.SPECIALTY_INDUSTRIAL_MACHINERY, _I.METAL_FABRICATION,
        _I.POLLUTION_TREATMENT_CONTROLS, _I.TOOLS_ACCESSORIES, _I.ELECTRICAL_EQUIPMENT_PARTS,
    ),
    IndustryGroup.TRANSPORTATION: (
        _I.AIRPORTS_AIR_SERVICES, _I.AIRLINES, _I.RAILROADS,
        _I.MARINE_SHIPPING, _I.TRUCKING, _I.INTEGRATED_FREIGHT_LOGISTICS,
    ),
    IndustryGroup.WASTE_MANAGEMENT: (_I.WASTE_MANAGEMENT,),
    IndustryGroup.SOFTWARE: (
        _I.INFORMATION_TECHNOLOGY_SERVICES, _I.SOFTWARE_APPLICATION, _I.SOFTWARE_INFRASTRUCTURE,
    ),
    IndustryGroup.HARDWARE: (
        _I.COMMUNICATION_EQUIPMENT, _I.COMPUTER_HARDWARE, _I.CONSUMER_ELECTRONICS,
        _I.ELECTRONIC_COMPONENTS, _I.ELECTRONICS_COMPUTER_DISTRIBUTION,
        _I.SCIENTIFIC_TECHNICAL_INSTRUMENTS,
    ),
    IndustryGroup.SEMICONDUCTORS: (
        _I.SEMICONDUCTOR_EQUIPMENT_MATERIALS, _I.SEMICONDUCTORS, _I.SOLAR,
    ),
}
del _I

_G = IndustryGroup
GROUPS_BY_SECTOR: dict[Sector, tuple[IndustryGroup, ...]] = {
    Sector.BASIC_MATERIALS: (
        _G.AGRICULTURE, _G.BUILDING_MATERIALS, _G.CHEMICALS,
        _G.FOREST_PRODUCTS, _G.METALS_MINING, _G.STEEL,
    ),
    Sector.CONSUMER_CYCLICAL: (
        _G.VEHICLES_PARTS, _G.FURNISHINGS_FIXTURES_APPLIANCES, _G.HOMEBUILDING_CONSTRUCTION,
        _G.MANUFACTURING_APPAREL_ACCESSORIES, _G.PACKAGING_CONTAINERS, _G.PERSONAL_SERVICES,
        _G.RESTAURANTS, _G.RETAIL_CYCLICAL, _G.TRAVEL_LEISURE,
    ),
    Sector.FINANCIAL_SERVICES: (
        _G.ASSET_MANAGEMENT, _G.BANKS, _G.CAPITAL_MARKETS, _G.INSURANCE,
        _G.DIVERSIFIED_FINANCIAL_SERVICES, _G.CREDIT_SERVICES,
    ),
    Sector.REAL_ESTATE: (_G.REAL_ESTATE, _G.REITS),
    Sector.CONSUMER_DEFENSIVE: (
        _G.BEVERAGES_ALCOHOLIC, _G.BEVERAGES_NON_ALCOHOLIC, _G.CONSUMER_PACKAGED_GOODS,
        _G.EDUCATION, _G.RETAIL_DEFENSIVE, _G.TOBACCO_PRODUCTS,
    ),
    Sector.HEALTHCARE: (
        _G.BIOTECHNOLOGY, _G.DRUG_MANUFACTURERS, _G.HEALTHCARE_PLANS,
        _G.HEALTHCARE_PROVIDERS_SERVICES, _G.MEDICAL_DEVICES_INSTRUMENTS,
        _G.MEDICAL_DIAGNOSTICS_RESEARCH, _G.MEDICAL_DISTRIBUTION,
    ),
    Sector.UTILITIES: (_G.UTILITIES_INDEPENDENT_POWER_PRODUCERS, _G.UTILITIES_REGULATED),
    Sector.COMMUNICATION_SERVICES: (
        _G.TELECOMMUNICATION_SERVICES, _G.MEDIA_DIVERSIFIED, _G.INTERACTIVE_MEDIA,
    ),
    Sector.ENERGY: (_G.OIL_GAS, _G.OTHER_ENERGY_SOURCES),
    Sector.INDUSTRIALS: (
        _G.AEROSPACE_DEFENSE, _G.BUSINESS_SERVICES, _G.CONGLOMERATES, _G.CONSTRUCTION,
        _G.FARM_HEAVY_CONSTRUCTION_MACHINERY, _G.INDUSTRIAL_DISTRIBUTION,
        _G.INDUSTRIAL_PRODUCTS, _G.TRANSPORTATION, _G.WASTE_MANAGEMENT,
    ),
    Sector.TECHNOLOGY: (_G.SOFTWARE, _G.HARDWARE, _G.SEMICONDUCTORS),
}
del _G


def _invert(mapping: dict) -> dict:
    """Invert a parent -> children table, requiring every child to have exactly one parent."""
    inverted: dict = {}
    for parent, children in mapping.items():
        for child in children:
            if child in inverted:
                raise ValueError(
                    f"{child!r} is listed under both {inverted[child]!r} and {parent!r}"
                )
            inverted[child] = parent
    return inverted


REGION_OF_COUNTRY: dict[str, Region] = _invert(COUNTRIES_BY_REGION)
GROUP_OF_INDUSTRY: dict[Industry, IndustryGroup] = _invert(INDUSTRIES_BY_GROUP)
SECTOR_OF_INDUSTRY_GROUP: dict[IndustryGroup, Sector] = _invert(GROUPS_BY_SECTOR)

# Label string -> dimension. The four label sets are disjoint.
LABEL_DIMENSIONS: dict[str, Dimension] = _invert(
    {dim: tuple(m.value for m in enum_type) for dim, enum_type in LABEL_TYPES.items()}
)


# ---------------------------------------------------------------------------
# Label Resolution
# ---------------------------------------------------------------------------

def _label_value(label: Union[str, Enum]) -> str:
    return label.value if isinstance(label, Enum) else str(label)


def dimension_of(label: Union[str, CategoryLabel]) -> Dimension:
    """Resolve a category label to its dimension, or raise UnknownCategoryError."""
    try:
        return LABEL_DIMENSIONS[_label_value(label)]
    except KeyError:
        raise UnknownCategoryError(
            f"Unknown category label '{_label_value(label)}'; "
            f"not a region, sector, size or style"
        ) from None


def parse_label(label: Union[str, CategoryLabel]) -> CategoryLabel:
    """Return the typed enum member (Region/Sector/Size/Style) for a label."""
    dimension = dimension_of(label)
    return LABEL_TYPES[dimension](_label_value(label))


def labels_of(dimension: Dimension) -> list[CategoryLabel]:
    """All labels of one dimension in canonical order."""
    return list(LABEL_TYPES[Dimension(dimension)])
