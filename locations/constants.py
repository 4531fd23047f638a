# locations/constants.py
#
# Purpose:
# - Fixed enumerations shared by the staff form, the sanitizer and the
#   schema builder. Keep ONE copy of each list here; the form template
#   receives FOOD_BUSINESS_TYPES as JSON so the show/hide of food fields
#   and the builder's filtering can never drift apart.
#

SCHEMA_CONTEXT = "https://schema.org"
DEFAULT_BUSINESS_TYPE = "LocalBusiness"

# Ordered day-key -> schema.org day name (Monday first).
DAYS_OF_WEEK = (
    ("Mo", "Monday"),
    ("Tu", "Tuesday"),
    ("We", "Wednesday"),
    ("Th", "Thursday"),
    ("Fr", "Friday"),
    ("Sa", "Saturday"),
    ("Su", "Sunday"),
)
DAY_KEYS = tuple(key for key, _ in DAYS_OF_WEEK)
DAY_NAMES = dict(DAYS_OF_WEEK)

CLOSED_KEYWORD = "closed"
CLOSED_TIME = "00:00"

FOOD_BUSINESS_TYPES = frozenset({
    "Restaurant",
    "FoodEstablishment",
    "Bakery",
    "BarOrPub",
    "Brewery",
    "CafeOrCoffeeShop",
    "Distillery",
    "FastFoodRestaurant",
    "IceCreamShop",
    "Winery",
})

# Grouped choices for the business type <select> (Django optgroup format).
BUSINESS_TYPE_CHOICES = [
    ("General", [
        ("LocalBusiness", "Local Business (General)"),
    ]),
    ("Automotive", [
        ("AutomotiveBusiness", "Automotive Business (General)"),
        ("AutoBodyShop", "Auto Body Shop"),
        ("AutoDealer", "Auto Dealer"),
        ("AutoPartsStore", "Auto Parts Store"),
        ("AutoRental", "Auto Rental"),
        ("AutoRepair", "Auto Repair"),
        ("AutoWash", "Auto Wash"),
        ("GasStation", "Gas Station"),
        ("MotorcycleDealer", "Motorcycle Dealer"),
        ("MotorcycleRepair", "Motorcycle Repair"),
    ]),
    ("Education & Childcare", [
        ("ChildCare", "Child Care"),
    ]),
    ("Emergency Services", [
        ("EmergencyService", "Emergency Service (General)"),
        ("FireStation", "Fire Station"),
        ("Hospital", "Hospital"),
        ("PoliceStation", "Police Station"),
    ]),
    ("Entertainment & Arts", [
        ("EntertainmentBusiness", "Entertainment Business (General)"),
        ("AdultEntertainment", "Adult Entertainment"),
        ("AmusementPark", "Amusement Park"),
        ("ArtGallery", "Art Gallery"),
        ("Casino", "Casino"),
        ("ComedyClub", "Comedy Club"),
        ("MovieTheater", "Movie Theater"),
        ("NightClub", "Night Club"),
        ("PerformingArtsTheater", "Performing Arts Theater"),
    ]),
    ("Financial Services", [
        ("FinancialService", "Financial Service (General)"),
        ("AccountingService", "Accounting Service"),
        ("AutomatedTeller", "Automated Teller (ATM)"),
        ("BankOrCreditUnion", "Bank or Credit Union"),
        ("InsuranceAgency", "Insurance Agency"),
    ]),
    ("Food & Drink", [
        ("FoodEstablishment", "Food Establishment (General)"),
        ("Bakery", "Bakery"),
        ("BarOrPub", "Bar or Pub"),
        ("Brewery", "Brewery"),
        ("CafeOrCoffeeShop", "Cafe or Coffee Shop"),
        ("Distillery", "Distillery"),
        ("FastFoodRestaurant", "Fast Food Restaurant"),
        ("IceCreamShop", "Ice Cream Shop"),
        ("Restaurant", "Restaurant"),
        ("Winery", "Winery"),
    ]),
    ("Government & Public Service", [
        ("GovernmentOffice", "Government Office (General)"),
        ("PostOffice", "Post Office"),
        ("Library", "Library"),
        ("RecyclingCenter", "Recycling Center"),
        ("TouristInformationCenter", "Tourist Information Center"),
    ]),
    ("Health & Beauty", [
        ("HealthAndBeautyBusiness", "Health & Beauty Business (General)"),
        ("BeautySalon", "Beauty Salon"),
        ("DaySpa", "Day Spa"),
        ("HairSalon", "Hair Salon"),
        ("HealthClub", "Health Club"),
        ("NailSalon", "Nail Salon"),
        ("TattooParlor", "Tattoo Parlor"),
    ]),
    ("Home & Construction", [
        ("HomeAndConstructionBusiness", "Home & Construction Business (General)"),
        ("Electrician", "Electrician"),
        ("GeneralContractor", "General Contractor"),
        ("HVACBusiness", "HVAC Business"),
        ("HousePainter", "House Painter"),
        ("Locksmith", "Locksmith"),
        ("MovingCompany", "Moving Company"),
        ("Plumber", "Plumber"),
        ("RoofingContractor", "Roofing Contractor"),
    ]),
    ("Legal Services", [
        ("LegalService", "Legal Service (General)"),
        ("Attorney", "Attorney"),
        ("Notary", "Notary"),
    ]),
    ("Lodging", [
        ("LodgingBusiness", "Lodging Business (General)"),
        ("BedAndBreakfast", "Bed And Breakfast"),
        ("Campground", "Campground"),
        ("Hostel", "Hostel"),
        ("Hotel", "Hotel"),
        ("Motel", "Motel"),
        ("Resort", "Resort"),
    ]),
    ("Medical & Healthcare", [
        ("MedicalBusiness", "Medical Business (General)"),
        ("MedicalOrganization", "Medical Organization (General)"),
        ("CommunityHealth", "Community Health Center"),
        ("Dentist", "Dentist"),
        ("Dermatology", "Dermatology Clinic"),
        ("DietNutrition", "Diet & Nutrition Center"),
        ("Geriatric", "Geriatric Clinic"),
        ("Gynecologic", "Gynecologic Clinic"),
        ("MedicalClinic", "Medical Clinic"),
        ("Midwifery", "Midwifery Practice"),
        ("Nursing", "Nursing Home"),
        ("Obstetric", "Obstetric Clinic"),
        ("Oncologic", "Oncologic Clinic"),
        ("Optician", "Optician"),
        ("Optometric", "Optometric Clinic"),
        ("Otolaryngologic", "Otolaryngologic Clinic"),
        ("Pediatric", "Pediatric Clinic"),
        ("Pharmacy", "Pharmacy"),
        ("Physician", "Physician"),
        ("Physiotherapy", "Physiotherapy Clinic"),
        ("PlasticSurgery", "Plastic Surgery Clinic"),
    ]),
    ("Other Local Businesses", [
        ("InternetCafe", "Internet Cafe"),
        ("PawnShop", "Pawn Shop"),
        ("ProfessionalService", "Professional Service (General)"),
        ("RadioStation", "Radio Station"),
        ("SelfStorage", "Self Storage"),
        ("ShoppingCenter", "Shopping Center"),
        ("TelevisionStation", "Television Station"),
        ("TravelAgency", "Travel Agency"),
        ("DryCleaningOrLaundry", "Dry Cleaning or Laundry"),
        ("EmploymentAgency", "Employment Agency"),
    ]),
    ("Sports & Recreation", [
        ("SportsActivityLocation", "Sports Activity Location (General)"),
        ("BowlingAlley", "Bowling Alley"),
        ("ExerciseGym", "Exercise Gym"),
        ("GolfCourse", "Golf Course"),
        ("PublicSwimmingPool", "Public Swimming Pool"),
        ("SkiResort", "Ski Resort"),
        ("SportsClub", "Sports Club"),
        ("StadiumOrArena", "Stadium or Arena"),
        ("TennisComplex", "Tennis Complex"),
    ]),
    ("Stores", [
        ("Store", "Store (General)"),
        ("BikeStore", "Bike Store"),
        ("BookStore", "Book Store"),
        ("ClothingStore", "Clothing Store"),
        ("ComputerStore", "Computer Store"),
        ("ConvenienceStore", "Convenience Store"),
        ("DepartmentStore", "Department Store"),
        ("ElectronicsStore", "Electronics Store"),
        ("Florist", "Florist"),
        ("FurnitureStore", "Furniture Store"),
        ("GardenStore", "Garden Store"),
        ("GroceryStore", "Grocery Store"),
        ("HardwareStore", "Hardware Store"),
        ("HobbyShop", "Hobby Shop"),
        ("HomeGoodsStore", "Home Goods Store"),
        ("JewelryStore", "Jewelry Store"),
        ("LiquorStore", "Liquor Store"),
        ("MensClothingStore", "Men's Clothing Store"),
        ("MobilePhoneStore", "Mobile Phone Store"),
        ("ShoeStore", "Shoe Store"),
        ("SportingGoodsStore", "Sporting Goods Store"),
        ("ToyStore", "Toy Store"),
        ("WholesaleStore", "Wholesale Store"),
    ]),
]

BUSINESS_TYPES = frozenset(
    value for _, group in BUSINESS_TYPE_CHOICES for value, _ in group
)

# Fields that must all be non-empty for a location to produce schema output.
REQUIRED_FIELDS = (
    "name",
    "street_address",
    "locality",
    "region",
    "postal_code",
    "country",
)

# Select values posted by the staff form for "Accepts Reservations".
RESERVATION_CHOICES = [
    ("", "Select"),
    ("True", "Yes"),
    ("False", "No"),
]
