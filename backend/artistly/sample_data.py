"""Sample catalog, dashboard requests and the static option lists.

These records are seeded into the database on startup and are the only data
the service ships with.
"""

from datetime import date

CATEGORIES = [
    {
        "id": "1",
        "name": "Singers",
        "description": "Professional vocalists for all occasions",
        "icon": "🎤",
    },
    {
        "id": "2",
        "name": "Dancers",
        "description": "Talented performers for entertainment",
        "icon": "💃",
    },
    {
        "id": "3",
        "name": "Speakers",
        "description": "Motivational and keynote speakers",
        "icon": "🎤",
    },
    {
        "id": "4",
        "name": "DJs",
        "description": "Music mixing and entertainment",
        "icon": "🎧",
    },
]

ARTISTS = [
    {
        "id": "1",
        "name": "Sarah Johnson",
        "category": ["Singers"],
        "bio": "Professional vocalist with 10+ years of experience in jazz and contemporary music.",
        "languages": ["English", "Spanish"],
        "fee_range": "$500-$1000",
        "location": "New York, NY",
        "image_url": "/api/placeholder/300/300",
        "rating": 4.8,
        "experience": "10+ years",
    },
    {
        "id": "2",
        "name": "Michael Chen",
        "category": ["Dancers"],
        "bio": "Contemporary dancer specializing in modern and hip-hop styles.",
        "languages": ["English", "Mandarin"],
        "fee_range": "$300-$800",
        "location": "Los Angeles, CA",
        "image_url": "/api/placeholder/300/300",
        "rating": 4.6,
        "experience": "8+ years",
    },
    {
        "id": "3",
        "name": "Emma Rodriguez",
        "category": ["Speakers"],
        "bio": "Motivational speaker and leadership coach with expertise in corporate events.",
        "languages": ["English", "Spanish"],
        "fee_range": "$1000-$2500",
        "location": "Miami, FL",
        "image_url": "/api/placeholder/300/300",
        "rating": 4.9,
        "experience": "15+ years",
    },
    {
        "id": "4",
        "name": "DJ Alex",
        "category": ["DJs"],
        "bio": "Professional DJ with expertise in electronic, hip-hop, and pop music.",
        "languages": ["English"],
        "fee_range": "$400-$1200",
        "location": "Chicago, IL",
        "image_url": "/api/placeholder/300/300",
        "rating": 4.7,
        "experience": "12+ years",
    },
    {
        "id": "5",
        "name": "Priya Patel",
        "category": ["Singers", "Dancers"],
        "bio": "Multi-talented performer specializing in Bollywood and fusion performances.",
        "languages": ["English", "Hindi", "Gujarati"],
        "fee_range": "$600-$1500",
        "location": "Houston, TX",
        "image_url": "/api/placeholder/300/300",
        "rating": 4.8,
        "experience": "9+ years",
    },
    {
        "id": "6",
        "name": "David Kim",
        "category": ["Speakers"],
        "bio": "Tech industry speaker and startup consultant with engaging presentation style.",
        "languages": ["English", "Korean"],
        "fee_range": "$800-$2000",
        "location": "San Francisco, CA",
        "image_url": "/api/placeholder/300/300",
        "rating": 4.5,
        "experience": "7+ years",
    },
]

BOOKING_REQUESTS = [
    {
        "id": "1",
        "artist_name": "Sarah Johnson",
        "category": ["Singers"],
        "location": "New York, NY",
        "fee_range": "$500-$1000",
        "status": "pending",
        "request_date": date(2024, 1, 15),
    },
    {
        "id": "2",
        "artist_name": "Michael Chen",
        "category": ["Dancers"],
        "location": "Los Angeles, CA",
        "fee_range": "$300-$800",
        "status": "approved",
        "request_date": date(2024, 1, 14),
    },
    {
        "id": "3",
        "artist_name": "Emma Rodriguez",
        "category": ["Speakers"],
        "location": "Miami, FL",
        "fee_range": "$1000-$2500",
        "status": "rejected",
        "request_date": date(2024, 1, 13),
    },
]

LOCATIONS = [
    "New York, NY",
    "Los Angeles, CA",
    "Chicago, IL",
    "Miami, FL",
    "Houston, TX",
    "San Francisco, CA",
    "Boston, MA",
    "Seattle, WA",
]

# Fee ranges offered by the onboarding form and the catalog filter. Seeded
# artists predate this list, so some of their labels fall outside it.
FEE_RANGES = [
    "$100-$300",
    "$300-$600",
    "$600-$1000",
    "$1000-$2000",
    "$2000+",
]

LANGUAGES = [
    "English",
    "Spanish",
    "French",
    "German",
    "Italian",
    "Portuguese",
    "Russian",
    "Chinese",
    "Japanese",
    "Korean",
    "Hindi",
    "Arabic",
]
