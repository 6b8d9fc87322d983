"""
Listings the old static site shipped with, in its original shape.
Copied into the store once by migrate_properties.py.
"""

LEGACY_PROPERTIES = [
    {
        "id": "pawna-lakeside-camping",
        "title": "Pawna Lakeside Camping",
        "description": "Tents on the lake shore with a bonfire, barbecue and live music under the stars.",
        "category": "camping",
        "location": "Pawna Lake",
        "price": "₹1,499",
        "priceNote": "per person with meal",
        "capacity": 2,
        "maxCapacity": 4,
        "rating": 4.6,
        "isTopSelling": True,
        "amenities": ["Bonfire", "Barbecue", "Washrooms", "Parking"],
        "highlights": ["Lake view", "Stargazing"],
        "activities": ["Kayaking", "Live music", "Board games"],
        "policies": ["No loud music after 11 PM", "ID proof required at check-in"],
        "images": [
            "https://images.unsplash.com/photo-1504280390367-361c6d9f38f4",
            "https://images.unsplash.com/photo-1487730116645-74489c95b41b",
            "https://images.unsplash.com/photo-1523987355523-c7b5b0dd90a7",
        ],
    },
    {
        "id": "tikona-fort-view-camping",
        "title": "Tikona Fort View Camping",
        "description": "Dome tents facing Tikona fort with an evening trek and a hot dinner.",
        "category": "camping",
        "location": "Tikona, Pawna",
        "price": "₹1,299",
        "priceNote": "per person with meal",
        "capacity": 2,
        "rating": 4.4,
        "isTopSelling": False,
        "amenities": ["Bonfire", "Washrooms"],
        "image": "https://images.unsplash.com/photo-1478131143081-80f7f84ca84d",
    },
    {
        "id": "luxury-lakeside-cottage",
        "title": "Luxury Lakeside Cottage",
        "description": "A private air-conditioned cottage with a sit-out deck over the water.",
        "category": "cottage",
        "location": "Pawna Lake",
        "price": "₹4,500/night",
        "priceNote": "per couple with breakfast",
        "capacity": 2,
        "maxCapacity": 3,
        "rating": 4.8,
        "isTopSelling": True,
        "checkInTime": "1:00 PM",
        "checkOutTime": "10:00 AM",
        "amenities": ["Air conditioning", "Private deck", "Wi-Fi", "Room service"],
        "highlights": ["Sunrise over the lake"],
        "images": [
            "https://images.unsplash.com/photo-1449158743715-0a90ebb6d2d8",
            "https://images.unsplash.com/photo-1510798831971-661eb04b3739",
        ],
    },
    {
        "id": "hillside-family-cottage",
        "title": "Hillside Family Cottage",
        "description": "Two-room cottage on the hill road with a lawn and an outdoor grill.",
        "category": "cottage",
        "location": "Lonavala",
        "price": "₹3,200",
        "priceNote": "per night",
        "capacity": 4,
        "maxCapacity": 6,
        "rating": 4.3,
        "isTopSelling": False,
        "address": "Near Bhushi Dam road, Lonavala, Maharashtra",
        "amenities": ["Lawn", "Grill", "Parking"],
        "image": "https://images.unsplash.com/photo-1464146072230-91cabc968266",
    },
    {
        "id": "infinity-pool-villa",
        "title": "Infinity Pool Villa",
        "description": "Four-bedroom villa with an infinity pool overlooking the Pawna valley.",
        "category": "villa",
        "location": "Pawna Valley",
        "price": "₹18,000/night",
        "priceNote": "entire villa",
        "capacity": 8,
        "maxCapacity": 12,
        "rating": 4.9,
        "isTopSelling": True,
        "contact": "+91 9822012345",
        "amenities": ["Infinity pool", "Chef on call", "Home theatre", "Wi-Fi"],
        "highlights": ["Valley view", "Private pool"],
        "activities": ["Pool party", "Barbecue night"],
        "policies": ["No pets", "Security deposit on arrival"],
        "images": [
            "https://images.unsplash.com/photo-1613490493576-7fde63acd811",
            "https://images.unsplash.com/photo-1600596542815-ffad4c1539a9",
            "https://images.unsplash.com/photo-1600585154340-be6161a56a0c",
        ],
    },
]
