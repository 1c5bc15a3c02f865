# src/sirdab/adapters/fixtures.py
"""Seed listings and cities for the in-memory backend and `manage seed-fixtures`."""
from __future__ import annotations

from typing import Any

from sirdab.domain.listing import Property
from sirdab.domain.records import City

FIXTURE_PROPERTIES: list[dict[str, Any]] = [
    # Warehouses - Riyadh
    {
        "id": "1",
        "title": "Modern Dry Warehouse in Industrial City",
        "description": "Spacious dry warehouse with high ceilings and excellent ventilation. Located in Riyadh Industrial City with easy access to major highways. Features include loading docks, office space, and 24/7 security.",
        "category": "warehouse",
        "sub_type": "Dry / Ambient",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": False,
        "for_lease_transfer": False,
        "price": 25000,
        "price_unit": "month",
        "annual_price": 300000,
        "size": 2500,
        "location": "Industrial City, Second Industrial Area",
        "city": "Riyadh",
        "district": "Industrial City",
        "latitude": 24.7136,
        "longitude": 46.6753,
        "image_url": "https://images.unsplash.com/photo-1586528116311-ad8dd3c8310d?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1586528116311-ad8dd3c8310d?w=800&q=80",
            "https://images.unsplash.com/photo-1553413077-190dd305871c?w=800&q=80",
            "https://images.unsplash.com/photo-1565891741441-64926e441838?w=800&q=80",
        ],
        "amenities": ["Municipality License", "Civil Defense License", "Security Cameras", "Electricity", "Water", "Manual Ramp"],
        "is_verified": True,
        "is_available": True,
        "available_from": "2024-02-01",
        "min_duration": 12,
        "max_duration": 60,
        "owner_name": "Ahmed Al-Rashid",
        "owner_phone": "+966501234567",
        "type_attributes": {
            "temperature_settings": "dry",
            "hazard_level": "low",
            "flooring": "concrete",
            "forklift_availability": "24/7",
            "ceiling_height": "12m",
            "loading_docks": 4,
        },
    },
    {
        "id": "2",
        "title": "Cold Storage Facility with SFDA Approval",
        "description": "Temperature-controlled warehouse ideal for food and pharmaceutical storage. SFDA approved with full documentation. Features multiple temperature zones from -25°C to +8°C.",
        "category": "warehouse",
        "sub_type": "Cold & Chilled",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": False,
        "for_lease_transfer": False,
        "price": 45000,
        "price_unit": "month",
        "annual_price": 540000,
        "size": 1800,
        "location": "Al Sulay, Industrial Zone",
        "city": "Riyadh",
        "district": "Al Sulay",
        "latitude": 24.6289,
        "longitude": 46.8467,
        "image_url": "https://images.unsplash.com/photo-1504893524553-b855bce32c67?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1504893524553-b855bce32c67?w=800&q=80",
            "https://images.unsplash.com/photo-1586528116022-dc59ec1b0d5a?w=800&q=80",
        ],
        "amenities": ["SFDA Food License", "Municipality License", "Civil Defense License", "Security Cameras", "Automatic Ramp", "Temp: cold"],
        "is_verified": True,
        "is_available": True,
        "available_from": "2024-01-15",
        "min_duration": 24,
        "max_duration": 120,
        "owner_name": "Mohammed Al-Faisal",
        "owner_phone": "+966509876543",
        "type_attributes": {
            "temperature_settings": "cold",
            "hazard_level": "low",
            "flooring": "epoxy",
            "forklift_availability": "24/7",
            "ceiling_height": "8m",
            "loading_docks": 2,
        },
    },
    {
        "id": "3",
        "title": "Cross-Dock Distribution Center",
        "description": "Strategic cross-docking facility with 12 loading bays. Perfect for logistics and distribution operations. Located near King Khalid International Airport.",
        "category": "warehouse",
        "sub_type": "Cross-dock",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": True,
        "for_daily_rent": False,
        "for_lease_transfer": False,
        "price": 65000,
        "price_unit": "month",
        "annual_price": 780000,
        "size": 4500,
        "location": "Airport Industrial City",
        "city": "Riyadh",
        "district": "Airport Area",
        "latitude": 24.9578,
        "longitude": 46.6989,
        "image_url": "https://images.unsplash.com/photo-1565891741441-64926e441838?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1565891741441-64926e441838?w=800&q=80",
            "https://images.unsplash.com/photo-1553413077-190dd305871c?w=800&q=80",
        ],
        "amenities": ["Municipality License", "Civil Defense License", "Security Cameras", "Electricity", "Water", "Sewage", "Automatic Ramp", "Forklift Available"],
        "is_verified": True,
        "is_available": True,
        "available_from": None,
        "min_duration": 12,
        "max_duration": None,
        "owner_name": None,
        "owner_phone": "+966555123456",
        "type_attributes": {
            "temperature_settings": "dry",
            "hazard_level": "low",
            "flooring": "concrete",
            "forklift_availability": "24/7",
            "ceiling_height": "14m",
            "loading_docks": 12,
            "cross_docking": True,
        },
    },

    # Warehouses - Jeddah
    {
        "id": "4",
        "title": "Port-Side Industrial Warehouse",
        "description": "Prime location warehouse near Jeddah Islamic Port. Ideal for import/export businesses. Features customs clearance support and bonded storage options.",
        "category": "warehouse",
        "sub_type": "Industrial Storage",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": False,
        "for_lease_transfer": False,
        "price": 35000,
        "price_unit": "month",
        "annual_price": 420000,
        "size": 3200,
        "location": "Jeddah Islamic Port Industrial Area",
        "city": "Jeddah",
        "district": "Port Area",
        "latitude": 21.4858,
        "longitude": 39.1925,
        "image_url": "https://images.unsplash.com/photo-1553413077-190dd305871c?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1553413077-190dd305871c?w=800&q=80",
            "https://images.unsplash.com/photo-1586528116311-ad8dd3c8310d?w=800&q=80",
        ],
        "amenities": ["Municipality License", "Civil Defense License", "Security Cameras", "Electricity", "Water", "Manual Ramp", "Racking: Heavy-duty"],
        "is_verified": True,
        "is_available": True,
        "available_from": "2024-03-01",
        "min_duration": 12,
        "max_duration": 60,
        "owner_name": "Khalid Al-Harbi",
        "owner_phone": "+966502345678",
        "type_attributes": {
            "temperature_settings": "dry",
            "hazard_level": "medium",
            "flooring": "concrete",
            "forklift_availability": "day",
            "ceiling_height": "10m",
            "loading_docks": 6,
        },
    },
    {
        "id": "5",
        "title": "Modern Logistics Hub - South Jeddah",
        "description": "State-of-the-art logistics facility with advanced inventory management systems. Perfect for e-commerce fulfillment operations. Multiple temperature zones available.",
        "category": "warehouse",
        "sub_type": "Dry / Ambient",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": False,
        "for_lease_transfer": False,
        "price": 55000,
        "price_unit": "month",
        "annual_price": 660000,
        "size": 5000,
        "location": "South Industrial City",
        "city": "Jeddah",
        "district": "Al Khumra",
        "latitude": 21.3891,
        "longitude": 39.2145,
        "image_url": "https://images.unsplash.com/photo-1586528116022-dc59ec1b0d5a?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1586528116022-dc59ec1b0d5a?w=800&q=80",
            "https://images.unsplash.com/photo-1565891741441-64926e441838?w=800&q=80",
            "https://images.unsplash.com/photo-1553413077-190dd305871c?w=800&q=80",
        ],
        "amenities": ["Municipality License", "Civil Defense License", "SFDA Food License", "Security Cameras", "Electricity", "Water", "Sewage", "Automatic Ramp"],
        "is_verified": True,
        "is_available": True,
        "available_from": None,
        "min_duration": 24,
        "max_duration": None,
        "owner_name": None,
        "owner_phone": "+966503456789",
        "type_attributes": {
            "temperature_settings": "climate-controlled",
            "hazard_level": "low",
            "flooring": "epoxy",
            "forklift_availability": "24/7",
            "ceiling_height": "12m",
            "loading_docks": 8,
        },
    },

    # Warehouses - Dammam
    {
        "id": "6",
        "title": "Petrochemical Storage Facility",
        "description": "Specialized warehouse for petrochemical and industrial materials. Fully compliant with safety regulations. Fire suppression systems and hazmat handling capabilities.",
        "category": "warehouse",
        "sub_type": "Industrial Storage",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": False,
        "for_lease_transfer": False,
        "price": 75000,
        "price_unit": "month",
        "annual_price": 900000,
        "size": 6000,
        "location": "Dammam Industrial City",
        "city": "Dammam",
        "district": "Industrial City",
        "latitude": 26.4207,
        "longitude": 50.0888,
        "image_url": "https://images.unsplash.com/photo-1504893524553-b855bce32c67?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1504893524553-b855bce32c67?w=800&q=80",
            "https://images.unsplash.com/photo-1586528116311-ad8dd3c8310d?w=800&q=80",
        ],
        "amenities": ["Municipality License", "Civil Defense License", "Security Cameras", "Electricity", "Water", "Sewage", "Automatic Ramp"],
        "is_verified": True,
        "is_available": True,
        "available_from": "2024-04-01",
        "min_duration": 36,
        "max_duration": 120,
        "owner_name": "Sultan Al-Dosari",
        "owner_phone": "+966504567890",
        "type_attributes": {
            "temperature_settings": "climate-controlled",
            "hazard_level": "high",
            "flooring": "epoxy",
            "forklift_availability": "24/7",
            "ceiling_height": "15m",
            "loading_docks": 10,
        },
    },

    # Workshops - Riyadh
    {
        "id": "7",
        "title": "Auto Workshop with Service Bays",
        "description": "Fully equipped automotive workshop with 6 service bays, hydraulic lifts, and inspection pit. Includes waiting area and parts storage. Perfect for car service center.",
        "category": "workshop",
        "sub_type": "Auto Workshop",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": False,
        "for_lease_transfer": True,
        "price": 18000,
        "price_unit": "month",
        "annual_price": 216000,
        "size": 800,
        "location": "Al Shifa Industrial Area",
        "city": "Riyadh",
        "district": "Al Shifa",
        "latitude": 24.5892,
        "longitude": 46.7234,
        "image_url": "https://images.unsplash.com/photo-1580983218765-e6e3a8a60c12?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1580983218765-e6e3a8a60c12?w=800&q=80",
            "https://images.unsplash.com/photo-1625047509168-a7026f36de04?w=800&q=80",
        ],
        "amenities": ["Municipality License", "Civil Defense License", "Electricity", "Water", "Sewage"],
        "is_verified": True,
        "is_available": True,
        "available_from": "2024-02-15",
        "min_duration": 12,
        "max_duration": 60,
        "owner_name": "Fahad Al-Otaibi",
        "owner_phone": "+966505678901",
        "type_attributes": {
            "power_capacity": "100 kVA",
            "ventilation": "mechanical",
            "equipment_included": True,
            "three_phase_electric": True,
            "pit_available": True,
        },
    },
    {
        "id": "8",
        "title": "Light Manufacturing Workshop",
        "description": "Industrial workshop suitable for light manufacturing, assembly, and packaging operations. Three-phase power, overhead crane, and generous floor space.",
        "category": "workshop",
        "sub_type": "Light Manufacturing",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": False,
        "for_lease_transfer": False,
        "price": 22000,
        "price_unit": "month",
        "annual_price": 264000,
        "size": 1200,
        "location": "Second Industrial City",
        "city": "Riyadh",
        "district": "Industrial City",
        "latitude": 24.7012,
        "longitude": 46.6823,
        "image_url": "https://images.unsplash.com/photo-1625047509168-a7026f36de04?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1625047509168-a7026f36de04?w=800&q=80",
            "https://images.unsplash.com/photo-1580983218765-e6e3a8a60c12?w=800&q=80",
        ],
        "amenities": ["Municipality License", "Civil Defense License", "Security Cameras", "Electricity", "Water"],
        "is_verified": True,
        "is_available": True,
        "available_from": None,
        "min_duration": 12,
        "max_duration": None,
        "owner_name": None,
        "owner_phone": "+966506789012",
        "type_attributes": {
            "power_capacity": "200 kVA",
            "ventilation": "both",
            "equipment_included": False,
            "three_phase_electric": True,
            "crane_available": True,
        },
    },

    # Workshops - Jeddah
    {
        "id": "9",
        "title": "Carpentry & Metal Workshop",
        "description": "Spacious workshop ideal for carpentry, metalwork, or fabrication. Dust extraction system installed. Good height clearance and ventilation.",
        "category": "workshop",
        "sub_type": "Carpentry / Metal",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": False,
        "for_lease_transfer": False,
        "price": 15000,
        "price_unit": "month",
        "annual_price": 180000,
        "size": 600,
        "location": "Al Harazat Industrial",
        "city": "Jeddah",
        "district": "Al Harazat",
        "latitude": 21.5234,
        "longitude": 39.1567,
        "image_url": "https://images.unsplash.com/photo-1588783948922-b39202546a81?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1588783948922-b39202546a81?w=800&q=80",
            "https://images.unsplash.com/photo-1580983218765-e6e3a8a60c12?w=800&q=80",
        ],
        "amenities": ["Municipality License", "Civil Defense License", "Electricity", "Water"],
        "is_verified": False,
        "is_available": True,
        "available_from": "2024-01-01",
        "min_duration": 12,
        "max_duration": 36,
        "owner_name": "Yasser Al-Maliki",
        "owner_phone": "+966507890123",
        "type_attributes": {
            "power_capacity": "75 kVA",
            "ventilation": "mechanical",
            "equipment_included": False,
            "three_phase_electric": True,
        },
    },

    # Workshops - Al Khobar
    {
        "id": "10",
        "title": "Small Industrial Unit - Al Khobar",
        "description": "Compact industrial workshop perfect for small-scale manufacturing or repairs. Located in accessible area with parking. Clean and ready for immediate use.",
        "category": "workshop",
        "sub_type": "Small Industrial",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": True,
        "for_lease_transfer": False,
        "price": 12000,
        "price_unit": "month",
        "annual_price": 144000,
        "size": 400,
        "location": "Al Thuqbah Industrial",
        "city": "Al Khobar",
        "district": "Al Thuqbah",
        "latitude": 26.2891,
        "longitude": 50.2134,
        "image_url": "https://images.unsplash.com/photo-1625047509168-a7026f36de04?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1625047509168-a7026f36de04?w=800&q=80",
        ],
        "amenities": ["Municipality License", "Electricity", "Water"],
        "is_verified": True,
        "is_available": True,
        "available_from": None,
        "min_duration": 6,
        "max_duration": None,
        "owner_name": "Nasser Al-Ghamdi",
        "owner_phone": "+966508901234",
        "type_attributes": {
            "power_capacity": "50 kVA",
            "ventilation": "natural",
            "equipment_included": False,
            "three_phase_electric": True,
        },
    },

    # Storage - Riyadh
    {
        "id": "11",
        "title": "SME Inventory Storage Units",
        "description": "Secure storage units perfect for small business inventory. 24/7 access, climate controlled, with inventory management support available. Various unit sizes.",
        "category": "storage",
        "sub_type": "SME Inventory",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": True,
        "for_lease_transfer": False,
        "price": 3500,
        "price_unit": "month",
        "annual_price": 42000,
        "size": 50,
        "location": "Al Malaz Storage Complex",
        "city": "Riyadh",
        "district": "Al Malaz",
        "latitude": 24.6678,
        "longitude": 46.7234,
        "image_url": "https://images.unsplash.com/photo-1600585152220-90363fe7e115?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1600585152220-90363fe7e115?w=800&q=80",
            "https://images.unsplash.com/photo-1558618666-fcd25c85cd64?w=800&q=80",
        ],
        "amenities": ["Security Cameras", "Electricity"],
        "is_verified": True,
        "is_available": True,
        "available_from": None,
        "min_duration": 1,
        "max_duration": None,
        "owner_name": None,
        "owner_phone": "+966509012345",
        "type_attributes": {
            "unit_size": "medium",
            "climate_controlled": True,
            "access_hours": "24/7",
            "security_level": "premium",
        },
    },
    {
        "id": "12",
        "title": "Personal Storage - North Riyadh",
        "description": "Clean and secure personal storage units. Ideal for household items, furniture, or personal belongings. Monthly rentals with flexible terms.",
        "category": "storage",
        "sub_type": "Personal Storage",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": False,
        "for_lease_transfer": False,
        "price": 1500,
        "price_unit": "month",
        "annual_price": 18000,
        "size": 25,
        "location": "Al Yasmin Storage",
        "city": "Riyadh",
        "district": "Al Yasmin",
        "latitude": 24.8234,
        "longitude": 46.6345,
        "image_url": "https://images.unsplash.com/photo-1558618666-fcd25c85cd64?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1558618666-fcd25c85cd64?w=800&q=80",
        ],
        "amenities": ["Security Cameras"],
        "is_verified": True,
        "is_available": True,
        "available_from": "2024-01-10",
        "min_duration": 1,
        "max_duration": 24,
        "owner_name": "Sara Al-Hussein",
        "owner_phone": "+966510123456",
        "type_attributes": {
            "unit_size": "small",
            "climate_controlled": False,
            "access_hours": "extended",
            "security_level": "standard",
        },
    },

    # Storage - Jeddah
    {
        "id": "13",
        "title": "Overflow & Seasonal Storage",
        "description": "Large storage space for businesses needing seasonal or overflow inventory storage. Flexible rental terms. Forklift access available.",
        "category": "storage",
        "sub_type": "Overflow / Seasonal",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": True,
        "for_lease_transfer": False,
        "price": 8000,
        "price_unit": "month",
        "annual_price": 96000,
        "size": 200,
        "location": "Al Safa Business Park",
        "city": "Jeddah",
        "district": "Al Safa",
        "latitude": 21.5567,
        "longitude": 39.1789,
        "image_url": "https://images.unsplash.com/photo-1600585152220-90363fe7e115?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1600585152220-90363fe7e115?w=800&q=80",
            "https://images.unsplash.com/photo-1558618666-fcd25c85cd64?w=800&q=80",
        ],
        "amenities": ["Security Cameras", "Electricity", "Manual Ramp", "Forklift Available"],
        "is_verified": False,
        "is_available": True,
        "available_from": None,
        "min_duration": 1,
        "max_duration": None,
        "owner_name": "Omar Al-Zahrani",
        "owner_phone": "+966511234567",
        "type_attributes": {
            "unit_size": "extra-large",
            "climate_controlled": False,
            "access_hours": "business",
            "security_level": "basic",
        },
    },

    # Storefronts - Riyadh
    {
        "id": "14",
        "title": "Prime Retail Showroom - Olaya",
        "description": "High-visibility showroom on Olaya Street. Large glass facade, high foot traffic area. Ideal for automotive, furniture, or electronics showroom.",
        "category": "storefront",
        "sub_type": "Showroom",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": False,
        "for_lease_transfer": True,
        "price": 85000,
        "price_unit": "month",
        "annual_price": 1020000,
        "size": 450,
        "location": "Olaya Street",
        "city": "Riyadh",
        "district": "Olaya",
        "latitude": 24.6912,
        "longitude": 46.6845,
        "image_url": "https://images.unsplash.com/photo-1604719312566-8912e9227c6a?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1604719312566-8912e9227c6a?w=800&q=80",
            "https://images.unsplash.com/photo-1555396273-367ea4eb4db5?w=800&q=80",
        ],
        "amenities": ["Municipality License", "Civil Defense License", "Security Cameras", "Electricity", "Water", "Sewage"],
        "is_verified": True,
        "is_available": True,
        "available_from": "2024-03-01",
        "min_duration": 24,
        "max_duration": 60,
        "owner_name": "Ibrahim Al-Saud",
        "owner_phone": "+966512345678",
        "type_attributes": {
            "facade_type": "glass",
            "display_windows": 4,
            "foot_traffic": "high",
            "parking_spots": 8,
            "street_level": True,
        },
    },
    {
        "id": "15",
        "title": "Dark Store for E-commerce",
        "description": "Ready-to-use dark store facility for quick commerce and delivery operations. Strategic location with easy access to residential areas.",
        "category": "storefront",
        "sub_type": "Dark Store",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": False,
        "for_lease_transfer": False,
        "price": 28000,
        "price_unit": "month",
        "annual_price": 336000,
        "size": 300,
        "location": "Al Muruj Commercial Area",
        "city": "Riyadh",
        "district": "Al Muruj",
        "latitude": 24.7456,
        "longitude": 46.6234,
        "image_url": "https://images.unsplash.com/photo-1555396273-367ea4eb4db5?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1555396273-367ea4eb4db5?w=800&q=80",
            "https://images.unsplash.com/photo-1604719312566-8912e9227c6a?w=800&q=80",
        ],
        "amenities": ["Municipality License", "Civil Defense License", "SFDA Food License", "Security Cameras", "Electricity", "Water"],
        "is_verified": True,
        "is_available": True,
        "available_from": None,
        "min_duration": 12,
        "max_duration": None,
        "owner_name": None,
        "owner_phone": "+966513456789",
        "type_attributes": {
            "facade_type": "solid",
            "foot_traffic": "low",
            "parking_spots": 4,
            "street_level": True,
        },
    },

    # Storefronts - Jeddah
    {
        "id": "16",
        "title": "SME Retail Space - Tahlia Street",
        "description": "Boutique retail space on popular Tahlia Street. Perfect for fashion, accessories, or specialty retail. High foot traffic and affluent customer base.",
        "category": "storefront",
        "sub_type": "SME Retail",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": False,
        "for_lease_transfer": False,
        "price": 45000,
        "price_unit": "month",
        "annual_price": 540000,
        "size": 180,
        "location": "Tahlia Street",
        "city": "Jeddah",
        "district": "Al Rawdah",
        "latitude": 21.5789,
        "longitude": 39.1234,
        "image_url": "https://images.unsplash.com/photo-1528698827591-e19ccd7bc23d?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1528698827591-e19ccd7bc23d?w=800&q=80",
            "https://images.unsplash.com/photo-1604719312566-8912e9227c6a?w=800&q=80",
        ],
        "amenities": ["Municipality License", "Civil Defense License", "Security Cameras", "Electricity", "Water"],
        "is_verified": True,
        "is_available": True,
        "available_from": "2024-02-01",
        "min_duration": 12,
        "max_duration": 36,
        "owner_name": "Layla Al-Juhani",
        "owner_phone": "+966514567890",
        "type_attributes": {
            "facade_type": "glass",
            "display_windows": 2,
            "foot_traffic": "high",
            "parking_spots": 2,
            "street_level": True,
        },
    },
    {
        "id": "17",
        "title": "Pop-up Space - Red Sea Mall",
        "description": "Temporary retail space inside Red Sea Mall. Perfect for product launches, seasonal campaigns, or market testing. Fully fitted and ready to use.",
        "category": "storefront",
        "sub_type": "Pop-up Space",
        "purpose": "daily_rent",
        "for_rent": False,
        "for_sale": False,
        "for_daily_rent": True,
        "for_lease_transfer": False,
        "price": 2500,
        "price_unit": "day",
        "annual_price": 912500,
        "size": 50,
        "location": "Red Sea Mall",
        "city": "Jeddah",
        "district": "Al Zahra",
        "latitude": 21.6012,
        "longitude": 39.1567,
        "image_url": "https://images.unsplash.com/photo-1604719312566-8912e9227c6a?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1604719312566-8912e9227c6a?w=800&q=80",
        ],
        "amenities": ["Security Cameras", "Electricity"],
        "is_verified": True,
        "is_available": True,
        "available_from": None,
        "min_duration": None,
        "max_duration": None,
        "owner_name": None,
        "owner_phone": "+966515678901",
        "type_attributes": {
            "facade_type": "mixed",
            "display_windows": 1,
            "foot_traffic": "high",
            "mall_location": True,
        },
    },

    # Storefronts - Dammam
    {
        "id": "18",
        "title": "Service Business Space",
        "description": "Versatile commercial space suitable for service businesses - salon, clinic, office, or professional services. Good parking and accessibility.",
        "category": "storefront",
        "sub_type": "Service Business",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": False,
        "for_lease_transfer": False,
        "price": 18000,
        "price_unit": "month",
        "annual_price": 216000,
        "size": 150,
        "location": "King Saud Street",
        "city": "Dammam",
        "district": "Al Faisaliyah",
        "latitude": 26.4312,
        "longitude": 50.1034,
        "image_url": "https://images.unsplash.com/photo-1555396273-367ea4eb4db5?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1555396273-367ea4eb4db5?w=800&q=80",
            "https://images.unsplash.com/photo-1528698827591-e19ccd7bc23d?w=800&q=80",
        ],
        "amenities": ["Municipality License", "Civil Defense License", "Electricity", "Water", "Sewage"],
        "is_verified": False,
        "is_available": True,
        "available_from": "2024-01-15",
        "min_duration": 12,
        "max_duration": 48,
        "owner_name": "Mansour Al-Qahtani",
        "owner_phone": "+966516789012",
        "type_attributes": {
            "facade_type": "mixed",
            "display_windows": 1,
            "foot_traffic": "medium",
            "parking_spots": 3,
            "street_level": True,
        },
    },

    # Additional properties for variety
    {
        "id": "19",
        "title": "Budget Warehouse - Al Ahsa",
        "description": "Affordable warehouse space in Al Ahsa. Basic amenities with good access to agricultural areas. Suitable for bulk storage.",
        "category": "warehouse",
        "sub_type": "Dry / Ambient",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": False,
        "for_daily_rent": False,
        "for_lease_transfer": False,
        "price": 8000,
        "price_unit": "month",
        "annual_price": 96000,
        "size": 1500,
        "location": "Industrial Area",
        "city": "Al Ahsa",
        "district": "Al Hofuf",
        "latitude": 25.3838,
        "longitude": 49.5872,
        "image_url": "https://images.unsplash.com/photo-1586528116311-ad8dd3c8310d?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1586528116311-ad8dd3c8310d?w=800&q=80",
        ],
        "amenities": ["Municipality License", "Electricity", "Manual Ramp"],
        "is_verified": False,
        "is_available": True,
        "available_from": None,
        "min_duration": 6,
        "max_duration": None,
        "owner_name": "Saad Al-Muhanna",
        "owner_phone": "+966517890123",
        "type_attributes": {
            "temperature_settings": "dry",
            "hazard_level": "low",
            "flooring": "concrete",
            "forklift_availability": "none",
            "ceiling_height": "8m",
            "loading_docks": 2,
        },
    },
    {
        "id": "20",
        "title": "Premium Auto Workshop - Buraydah",
        "description": "Modern auto workshop in Buraydah with state-of-the-art equipment. Includes diagnostic systems, lifts, and tire service area.",
        "category": "workshop",
        "sub_type": "Auto Workshop",
        "purpose": "rent",
        "for_rent": True,
        "for_sale": True,
        "for_daily_rent": False,
        "for_lease_transfer": False,
        "price": 20000,
        "price_unit": "month",
        "annual_price": 240000,
        "size": 700,
        "location": "Automotive District",
        "city": "Buraydah",
        "district": "Al Iskan",
        "latitude": 26.3264,
        "longitude": 43.9750,
        "image_url": "https://images.unsplash.com/photo-1580983218765-e6e3a8a60c12?w=800&q=80",
        "images": [
            "https://images.unsplash.com/photo-1580983218765-e6e3a8a60c12?w=800&q=80",
            "https://images.unsplash.com/photo-1625047509168-a7026f36de04?w=800&q=80",
        ],
        "amenities": ["Municipality License", "Civil Defense License", "Electricity", "Water", "Sewage"],
        "is_verified": True,
        "is_available": True,
        "available_from": "2024-02-01",
        "min_duration": 12,
        "max_duration": 60,
        "owner_name": "Turki Al-Mutairi",
        "owner_phone": "+966518901234",
        "type_attributes": {
            "power_capacity": "150 kVA",
            "ventilation": "mechanical",
            "equipment_included": True,
            "three_phase_electric": True,
            "pit_available": True,
        },
    },
]

FIXTURE_CITIES: list[dict[str, Any]] = [
    {"id": 1, "name_en": "Riyadh", "name_ar": "الرياض", "latitude": "24.7136", "longitude": "46.6753", "slug": "riyadh"},
    {"id": 2, "name_en": "Jeddah", "name_ar": "جدة", "latitude": "21.4858", "longitude": "39.1925", "slug": "jeddah"},
    {"id": 3, "name_en": "Dammam", "name_ar": "الدمام", "latitude": "26.4207", "longitude": "50.0888", "slug": "dammam"},
    {"id": 4, "name_en": "Al Khobar", "name_ar": "الخبر", "latitude": "26.2891", "longitude": "50.2134", "slug": "al-khobar"},
    {"id": 5, "name_en": "Al Ahsa", "name_ar": "الأحساء", "latitude": "25.3838", "longitude": "49.5872", "slug": "al-ahsa"},
    {"id": 6, "name_en": "Abha", "name_ar": "أبها", "latitude": "18.2164", "longitude": "42.5053", "slug": "abha"},
    {"id": 7, "name_en": "Buraydah", "name_ar": "بريدة", "latitude": "26.3264", "longitude": "43.9750", "slug": "buraydah"},
    {"id": 8, "name_en": "Mecca", "name_ar": "مكة المكرمة", "latitude": "21.3891", "longitude": "39.8579", "slug": "mecca"},
    {"id": 9, "name_en": "Medina", "name_ar": "المدينة المنورة", "latitude": "24.5247", "longitude": "39.5692", "slug": "medina"},
    {"id": 10, "name_en": "Tabuk", "name_ar": "تبوك", "latitude": "28.3998", "longitude": "36.5717", "slug": "tabuk"},
    {"id": 11, "name_en": "Khamis Mushait", "name_ar": "خميس مشيط", "latitude": "18.3000", "longitude": "42.7333", "slug": "khamis-mushait"},
]


def load_properties() -> list[Property]:
    return [Property.model_validate(p) for p in FIXTURE_PROPERTIES]


def load_cities() -> list[City]:
    return [City.model_validate(c) for c in FIXTURE_CITIES]
