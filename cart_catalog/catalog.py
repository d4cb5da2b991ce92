"""Demo product catalog. Prices are in the smallest currency unit (VND)."""
from __future__ import annotations

from cart_catalog.domain.cart import Product

PRODUCTS: tuple[Product, ...] = (
    Product(
        id="SKU001",
        title="Apple MacBook Air M2 2024 8CPU 8GPU 16GB 256GB",
        image="apple-mac-book-air-m2-2024-8-cpu-8-gpu-16-gb-256-gb.webp",
        price=21590000,
        quantity=1,
    ),
    Product(
        id="SKU002",
        title="Mac mini M4 2024 10CPU 10GPU 24GB 512GB",
        image="mac-mini-m4-2024-10-cpu-10-gpu-24-gb-512-gb.webp",
        price=24990000,
        quantity=1,
    ),
    Product(
        id="SKU003",
        title="iPhone 16 Pro Max 256GB",
        image="iphone-16-pro-max-256-gb.webp",
        price=30990000,
        quantity=1,
    ),
    Product(
        id="SKU004",
        title="iPad Pro M4 11 inch Wifi 256GB",
        image="ipad-pro-m4-11-inch-wifi-256-gb.webp",
        price=27990000,
        quantity=1,
    ),
    Product(
        id="SKU005",
        title="Apple Watch Series 10 46mm (GPS) Viền Nhôm Dây Cao Su Size S/M",
        image="apple-watch-series-10-46-mm-gps-vien-nhom-day-cao-su-size-s-m.webp",
        price=10990000,
        quantity=1,
    ),
    Product(
        id="SKU006",
        title="Tai nghe Bluetooth Apple AirPods 4",
        image="tai-nghe-bluetooth-apple-airpods-4.webp",
        price=3290000,
        quantity=1,
    ),
    Product(
        id="SKU007",
        title="Apple AirTag",
        image="apple-air-tag.webp",
        price=790000,
        quantity=2,
    ),
)

