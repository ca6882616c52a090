"""
Fixed data sets served by the simulated dashboard sources
"""

from .records import UpcomingTrip, BookingHistoryEntry, Suggestion

UPCOMING_TRIPS = [
    {
        'id': '1',
        'destination': 'Alleppey, Kerala',
        'start_date': '2024-12-15',
        'end_date': '2024-12-22',
        'guests': 2,
        'price': 100,
        'image_url': 'https://www.ekeralatourism.net/wp-content/uploads/2018/03/Alleppey.jpg',
        'status': 'confirmed',
    },
    {
        'id': '2',
        'destination': 'Agra, Delhi',
        'start_date': '2025-01-10',
        'end_date': '2025-01-18',
        'guests': 1,
        'price': 200,
        'image_url': 'https://www.tourmyindia.com/socialimg/taj-mahal-up.jpg',
        'status': 'pending',
    },
    {
        'id': '3',
        'destination': 'Manali, Himachal Pradesh',
        'start_date': '2025-02-14',
        'end_date': '2025-02-21',
        'guests': 4,
        'price': 180,
        'image_url': 'https://www.oyorooms.com/travel-guide/wp-content/uploads/2019/06/Top-4-Indian-skiing-destinations-Solang.jpg',
        'status': 'confirmed',
    },
]

BOOKING_HISTORY = [
    {
        'id': '1',
        'destination': 'Thiruvalluvar Statue, Kannyakumari',
        'start_date': '2024-06-15',
        'end_date': '2024-06-22',
        'guests': 7,
        'price': 80,
        'image_url': 'https://www.starlinetravels.com/wp-content/uploads/2021/06/Resized-thiruvalluvar-statue.jpg',
        'status': 'completed',
        'booking_date': '2024-03-10',
    },
    {
        'id': '2',
        'destination': 'Periya Kovil, Tanjore',
        'start_date': '2024-08-20',
        'end_date': '2024-08-25',
        'guests': 10,
        'price': 100,
        'image_url': 'https://www.delhitourism.com/images/destination/5e5f83dac53d61.jpg',
        'status': 'completed',
        'booking_date': '2024-05-15',
    },
    {
        'id': '3',
        'destination': 'Koomapatty, Virudunagar',
        'start_date': '2024-09-10',
        'end_date': '2024-09-17',
        'guests': 8,
        'price': 100,
        'image_url': 'https://lh7-rt.googleusercontent.com/docsz/AD_4nXcplAN4FQvJTxNZ1L3DzRi3FoKaZpaAeUO2lIBsPXpgRwic_CxWdtDuvIB-MZSybtlwk4vwNiCtUoirWF2wBS0-1-Knm3vqlf7NLCy0cPRYDyKMVWQFd1hUrgvHb-e1nKEqon-LFw?key=kBehL50iaasCDXsR-lVl3Q',
        'status': 'canceled',
        'booking_date': '2024-07-05',
    },
    {
        'id': '4',
        'destination': 'Velankanni Beach, Naagai',
        'start_date': '2024-10-01',
        'end_date': '2024-10-08',
        'guests': 5,
        'price': 200,
        'image_url': 'https://www.oyorooms.com/travel-guide/wp-content/uploads/2019/09/Velankanni.jpg',
        'status': 'completed',
        'booking_date': '2024-08-12',
    },
]

SUGGESTIONS = [
    {
        'id': '1',
        'destination': 'OOTY',
        'country': 'Tamil Nadu',
        'description': 'Escape to Ooty, a picturesque hill station with misty mountains, tea gardens, boat rides, and breathtaking views all year round!',
        'rating': 4.8,
        'price_range': '$20-200/night',
        'image_url': 'https://e0.pxfuel.com/wallpapers/343/593/desktop-wallpaper-ooty-hill-station.jpg',
        'category': 'Hill Station',
        'reason': 'Based on your love for Hill destinations',
    },
    {
        'id': '2',
        'destination': 'Meenakshi Amman Temple',
        'country': 'Madurai',
        'description': 'Meenakshi Amman Temple in Madurai is a magnificent Dravidian marvel, famed for its towering gopurams, vibrant sculptures, and sacred rituals.',
        'rating': 4.9,
        'price_range': '$15-30/night',
        'image_url': 'https://sanatanajourney.com/wp-content/uploads/2025/03/Madurai-Meenakshi-Amman-Temple-Features.jpg',
        'category': 'Culture',
        'reason': 'Spiritual, architectural, cultural, historic, vibrant',
    },
    {
        'id': '3',
        'destination': 'Theni & Thekkady (Border)',
        'country': 'Theni',
        'description': 'Adventure lovers can enjoy river rafting on the Periyar River, wildlife trekking in Periyar Tiger Reserve, and scenic hikes through spice plantations and waterfalls.',
        'rating': 4.7,
        'price_range': '$25-50/night',
        'image_url': 'https://xiradestinations.com/wp-content/uploads/2020/04/1414.jpg',
        'category': 'Adventure',
        'reason': 'Thrilling, scenic, serene, wild, refreshing.',
    },
    {
        'id': '4',
        'destination': 'Kuttralam',
        'country': 'Thenkasi',
        'description': 'Immerse yourself in vibrant markets, stunning architecture, and rich culture.',
        'rating': 4.6,
        'price_range': '$10-25/night',
        'image_url': 'https://img3.oastatic.com/img2/64600669/max/variant.jpg',
        'category': 'Nature',
        'reason': 'Healing, adventurous, scenic, cultural, refreshing.',
    },
    {
        'id': '5',
        'destination': 'Velankanni',
        'country': 'Nagappattinam',
        'description': 'The Basilica of Our Lady of Good Health draws millions annually, blending spirituality, colonial architecture, and peaceful beachfront charm.',
        'rating': 4.5,
        'price_range': '$18-35/night',
        'image_url': 'https://tripxl.com/blog/wp-content/uploads/2024/11/Basilica-Of-Our-Lady-Of-Good-Health.jpg',
        'category': 'Culture',
        'reason': 'Spiritual, healing, peaceful, sacred, iconic.',
    },
    {
        'id': '6',
        'destination': 'Dhanushkodi',
        'country': 'Rameshwaram',
        'description': 'Rameswaram is a sacred island pilgrimage famed for the majestic Ramanathaswamy Temple, sprawling corridors, spiritual baths, historic bridge, and pristine beaches.',
        'rating': 4.4,
        'price_range': '$120-280/night',
        'image_url': 'https://rameswaramtourism.org/info/FR_Arichalmunai.webp',
        'category': 'Beach',
        'reason': 'Spiritual, historic, scenic, rejuvenating, iconic.',
    },
]


def upcoming_trips():
    return [UpcomingTrip.from_dict(item) for item in UPCOMING_TRIPS]


def booking_history():
    return [BookingHistoryEntry.from_dict(item) for item in BOOKING_HISTORY]


def suggestions():
    return [Suggestion.from_dict(item) for item in SUGGESTIONS]
