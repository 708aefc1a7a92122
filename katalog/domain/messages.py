"""User-facing messages.

The catalog is used in Indonesian, so every string a user can see lives here.
"""

from typing import Final

from .constants import (
    MAX_DESCRIPTION_LENGTH,
    MIN_DESCRIPTION_LENGTH_EXTENDED,
)

# Field errors
NAME_REQUIRED: Final = "Nama Produk wajib diisi."
NAME_DUPLICATE: Final = "Nama Produk sudah ada."
DESCRIPTION_TOO_LONG: Final = (
    f"Deskripsi maksimal {MAX_DESCRIPTION_LENGTH} karakter."
)
DESCRIPTION_TOO_SHORT: Final = (
    f"Deskripsi minimal {MIN_DESCRIPTION_LENGTH_EXTENDED} karakter."
)
PRICE_REQUIRED: Final = "Harga wajib diisi."
PRICE_NOT_A_NUMBER: Final = "Harga harus berupa angka."
PRICE_NOT_POSITIVE: Final = "Harga harus lebih dari 0."
CATEGORY_REQUIRED: Final = "Kategori wajib dipilih."
CATEGORY_INVALID: Final = "Kategori tidak valid."
RELEASE_DATE_REQUIRED: Final = "Tanggal rilis wajib diisi."
RELEASE_DATE_INVALID: Final = "Format tanggal rilis tidak valid."
RELEASE_DATE_IN_FUTURE: Final = "Tanggal rilis tidak boleh di masa depan."
STOCK_REQUIRED: Final = "Stok wajib diisi."
STOCK_NOT_AN_INTEGER: Final = "Stok harus berupa bilangan bulat."
STOCK_NEGATIVE: Final = "Stok tidak boleh negatif."

# Notifications
CHECK_INPUT: Final = "Periksa kembali input Anda."
PRODUCT_ADDED: Final = "Produk berhasil ditambahkan."
PRODUCT_UPDATED: Final = "Produk berhasil diperbarui."
PRODUCT_DELETED: Final = "Produk berhasil dihapus."
SAVE_FAILED: Final = "Gagal menyimpan data. Silakan coba lagi."
UNEXPECTED_ERROR: Final = "Terjadi kesalahan. Silakan coba lagi."


def name_too_short(minimum: int) -> str:
    return f"Minimal {minimum} karakter."


def name_too_long(maximum: int) -> str:
    return f"Maksimal {maximum} karakter."


def confirm_delete_prompt(name: str) -> str:
    return f'Apakah Anda yakin ingin menghapus produk "{name}"?'
