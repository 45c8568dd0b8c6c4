"""
Bundled airport reference table.

Demand figures are daily passenger potential per traveler segment;
runway lengths are in feet.
"""

from typing import Any, Dict, List


def _airport(code, name, city, country, lat, lng, business, leisure, first_class,
             runway_length, landing_fee, open_hour=0, close_hour=24) -> Dict[str, Any]:
    return {
        "code": code,
        "name": name,
        "city": city,
        "country": country,
        "lat": lat,
        "lng": lng,
        "operating_hours": {"open": open_hour, "close": close_hour},
        "demand": {"business": business, "leisure": leisure, "first_class": first_class},
        "runway_length": runway_length,
        "landing_fee": landing_fee,
    }


AIRPORTS: List[Dict[str, Any]] = [
    # North America
    _airport("JFK", "John F. Kennedy International Airport", "New York", "United States",
             40.6413, -73.7781, 420, 780, 60, 14511, 4500),
    _airport("LAX", "Los Angeles International Airport", "Los Angeles", "United States",
             33.9425, -118.408, 380, 820, 55, 12923, 4200),
    _airport("ORD", "O'Hare International Airport", "Chicago", "United States",
             41.9742, -87.9073, 400, 600, 40, 13000, 3800),
    _airport("ATL", "Hartsfield-Jackson Atlanta International Airport", "Atlanta", "United States",
             33.6407, -84.4277, 350, 700, 30, 12390, 3500),
    _airport("DFW", "Dallas/Fort Worth International Airport", "Dallas", "United States",
             32.8998, -97.0403, 320, 560, 30, 13401, 3300),
    _airport("SFO", "San Francisco International Airport", "San Francisco", "United States",
             37.6213, -122.379, 360, 520, 45, 11870, 4000),
    _airport("SEA", "Seattle-Tacoma International Airport", "Seattle", "United States",
             47.4502, -122.3088, 240, 380, 20, 11901, 3000),
    _airport("MIA", "Miami International Airport", "Miami", "United States",
             25.7959, -80.287, 220, 640, 35, 13016, 3400),
    _airport("BOS", "Logan International Airport", "Boston", "United States",
             42.3656, -71.0096, 260, 380, 25, 10083, 3200),
    _airport("DEN", "Denver International Airport", "Denver", "United States",
             39.8561, -104.6737, 250, 450, 15, 16000, 2900),
    _airport("YYZ", "Toronto Pearson International Airport", "Toronto", "Canada",
             43.6777, -79.6248, 280, 420, 25, 11120, 3100),
    _airport("MEX", "Mexico City International Airport", "Mexico City", "Mexico",
             19.4361, -99.0719, 200, 480, 15, 12966, 2500),
    # South America
    _airport("GRU", "São Paulo/Guarulhos International Airport", "São Paulo", "Brazil",
             -23.4356, -46.4731, 210, 420, 20, 12140, 2600),
    _airport("EZE", "Ministro Pistarini International Airport", "Buenos Aires", "Argentina",
             -34.8222, -58.5358, 150, 300, 12, 10827, 2400),
    # Europe
    _airport("LHR", "Heathrow Airport", "London", "United Kingdom",
             51.47, -0.4543, 480, 620, 80, 12802, 5200),
    _airport("CDG", "Charles de Gaulle Airport", "Paris", "France",
             49.0097, 2.5479, 400, 640, 65, 13829, 4800),
    _airport("FRA", "Frankfurt Airport", "Frankfurt", "Germany",
             50.0379, 8.5622, 420, 420, 50, 13123, 4600),
    _airport("AMS", "Amsterdam Airport Schiphol", "Amsterdam", "Netherlands",
             52.3105, 4.7683, 330, 500, 35, 12467, 4100),
    _airport("MAD", "Adolfo Suárez Madrid-Barajas Airport", "Madrid", "Spain",
             40.4983, -3.5676, 260, 540, 25, 14272, 3600),
    _airport("FCO", "Leonardo da Vinci-Fiumicino Airport", "Rome", "Italy",
             41.8003, 12.2389, 220, 560, 30, 12795, 3500),
    _airport("ZRH", "Zurich Airport", "Zurich", "Switzerland",
             47.4582, 8.5555, 300, 240, 45, 12139, 4400),
    _airport("IST", "Istanbul Airport", "Istanbul", "Turkey",
             41.2753, 28.7519, 300, 560, 30, 13451, 3300),
    # Middle East and Africa
    _airport("DXB", "Dubai International Airport", "Dubai", "United Arab Emirates",
             25.2532, 55.3657, 380, 600, 90, 13124, 4300),
    _airport("DOH", "Hamad International Airport", "Doha", "Qatar",
             25.2731, 51.608, 260, 320, 70, 15912, 3900),
    _airport("JNB", "O. R. Tambo International Airport", "Johannesburg", "South Africa",
             -26.1392, 28.246, 180, 260, 15, 14495, 2700),
    _airport("CAI", "Cairo International Airport", "Cairo", "Egypt",
             30.1219, 31.4056, 140, 380, 10, 13123, 2200),
    # Asia-Pacific
    _airport("HND", "Haneda Airport", "Tokyo", "Japan",
             35.5494, 139.7798, 460, 680, 60, 11024, 5000),
    _airport("ICN", "Incheon International Airport", "Seoul", "South Korea",
             37.4602, 126.4407, 340, 520, 40, 12303, 4000),
    _airport("PEK", "Beijing Capital International Airport", "Beijing", "China",
             40.0799, 116.6031, 400, 620, 45, 12467, 3700),
    _airport("HKG", "Hong Kong International Airport", "Hong Kong", "China",
             22.308, 113.9185, 420, 540, 70, 12467, 4700),
    _airport("SIN", "Singapore Changi Airport", "Singapore", "Singapore",
             1.3644, 103.9915, 400, 560, 75, 13123, 4500),
    _airport("SYD", "Sydney Kingsford Smith Airport", "Sydney", "Australia",
             -33.9399, 151.1753, 280, 480, 30, 13000, 3800, open_hour=6, close_hour=23),
]
