'''Shared enumerations, role identifiers and header records'''
