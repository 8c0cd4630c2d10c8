from django.contrib import admin

from .models import Category, Customer, Discount, PriceOption, Product


class PriceOptionInline(admin.TabularInline):
    model = PriceOption
    extra = 0


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ("title", "status", "product_type", "variable_pricing", "price")
    list_filter = ("status", "product_type")
    search_fields = ("title",)
    inlines = [PriceOptionInline]


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ("name", "email", "user")
    search_fields = ("name", "email")


@admin.register(Discount)
class DiscountAdmin(admin.ModelAdmin):
    list_display = ("name", "code", "status", "amount")
    list_filter = ("status",)
    search_fields = ("name", "code")


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "parent")
    prepopulated_fields = {"slug": ("name",)}
