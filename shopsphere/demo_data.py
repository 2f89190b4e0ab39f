"""Demo catalog and featured showcase products."""

from __future__ import annotations

from typing import List

from .schemas import CatalogItem, FeaturedProduct

_IMG = "https://images.unsplash.com/photo-{}?auto=format&fit=crop&w=1000&q=80"

CATEGORIES = ["all", "electronics", "accessories", "clothing", "home"]

DEMO_PRODUCTS: List[CatalogItem] = [
    CatalogItem(
        id=1,
        name="Premium Wireless Headphones",
        price=129.99,
        images=[_IMG.format("1505740420928-5e560c06d30e")],
        rating=4.5,
        category="electronics",
        description="Premium noise-cancelling wireless headphones with crystal clear sound quality and 20-hour battery life.",
    ),
    CatalogItem(
        id=2,
        name="Designer Watch Collection",
        price=249.99,
        images=[_IMG.format("1523275335684-37898b6baf30")],
        rating=4.8,
        category="accessories",
        description="Elegant designer timepiece with premium materials and Swiss movement. Water-resistant up to 50m.",
    ),
    CatalogItem(
        id=3,
        name="Smart Home Speaker",
        price=89.99,
        images=[_IMG.format("1589003077984-894e133dabab")],
        rating=4.2,
        category="electronics",
        description="Voice-controlled smart speaker with integrated virtual assistant. Connect to your smart home devices.",
    ),
    CatalogItem(
        id=4,
        name="Organic Cotton T-Shirt",
        price=34.99,
        images=[_IMG.format("1581655353564-df123a1eb820")],
        rating=4.0,
        category="clothing",
        description="Sustainable, soft organic cotton t-shirt. Ethically made with eco-friendly dyes. Available in multiple colors.",
    ),
    CatalogItem(
        id=5,
        name="Leather Crossbody Bag",
        price=79.99,
        images=[_IMG.format("1590874103328-eac38a683ce7")],
        rating=4.6,
        category="accessories",
        description="Handcrafted genuine leather crossbody bag with adjustable strap and multiple compartments.",
    ),
    CatalogItem(
        id=6,
        name="Bluetooth Fitness Tracker",
        price=59.99,
        images=[_IMG.format("1576243345690-4e4b79b63288")],
        rating=4.3,
        category="electronics",
        description="Waterproof fitness tracker with heart rate monitoring, sleep tracking, and smartphone notifications.",
    ),
    CatalogItem(
        id=7,
        name="Ceramic Coffee Mug Set",
        price=29.99,
        images=[_IMG.format("1509042239860-f550ce710b93")],
        rating=4.7,
        category="home",
        description="Set of 4 handmade ceramic coffee mugs. Microwave and dishwasher safe with artistic glazed finish.",
    ),
    CatalogItem(
        id=8,
        name="Ultra HD Smartphone",
        price=699.99,
        images=[_IMG.format("1592899677977-9c10ca588bbd")],
        rating=4.9,
        category="electronics",
        description="Latest smartphone with 6.7-inch Ultra HD display, advanced camera system, and all-day battery life.",
    ),
]

FEATURED_PRODUCTS: List[FeaturedProduct] = [
    FeaturedProduct(
        id=101,
        name="Modern Leather Crossbody Bag",
        description="Luxurious genuine leather crossbody bag with adjustable strap and gold-tone hardware.",
        price=149.99,
        colors=["#8B4513", "#000000", "#F5F5DC"],
        sizes=["Small", "Medium", "Large"],
        images=[
            _IMG.format("1548036328-c9fa89d128fa"),
            _IMG.format("1591561954557-26941169b49e"),
            _IMG.format("1566150905458-1bf1fc113f0d"),
        ],
        features=[
            "100% genuine leather",
            "Adjustable shoulder strap",
            "Multiple interior pockets",
            "Gold-tone hardware",
            "Zipper closure",
        ],
        rating=4.8,
        review_count=124,
    ),
    FeaturedProduct(
        id=102,
        name="Smart Fitness Tracker Watch",
        description="Advanced fitness tracker with heart rate monitoring, sleep analysis, and smartphone notifications.",
        price=99.99,
        colors=["#000000", "#1E90FF", "#FF4500"],
        sizes=["One Size"],
        images=[
            _IMG.format("1579586337278-3befd40fd17a"),
            _IMG.format("1508685096489-7aacd43bd3b1"),
            _IMG.format("1559311648-d9ef4f9bc471"),
        ],
        features=[
            "24/7 heart rate monitoring",
            "Sleep tracking",
            "Activity tracking with 15+ sport modes",
            "Water-resistant up to 50m",
            "Up to 7 days battery life",
        ],
        rating=4.6,
        review_count=253,
    ),
    FeaturedProduct(
        id=103,
        name="Premium Wireless Noise-Cancelling Headphones",
        description="Studio-quality sound with advanced active noise cancellation technology.",
        price=249.99,
        colors=["#000000", "#FFFFFF", "#708090"],
        sizes=["One Size"],
        images=[
            _IMG.format("1546435770-a3e736e9ae14"),
            _IMG.format("1577174881658-0f30ed549adc"),
            _IMG.format("1590658268037-6bf12165a8df"),
        ],
        features=[
            "Active noise cancellation",
            "High-resolution audio",
            "30 hours battery life",
            "Quick charge (5 mins = 3 hours playback)",
            "Memory foam ear cushions",
        ],
        rating=4.9,
        review_count=412,
    ),
]
